"""Hive/Kudu bridge exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type so callers can decide
whether to retry or abort.
"""

from __future__ import annotations


class BridgeError(Exception):
    """Base exception for all bridge failures."""


class BridgeConfigError(BridgeError):
    """Raised when a required setting is missing or invalid."""


class KuduIOError(BridgeError, OSError):
    """Raised when the Kudu client cannot be built or connected."""


class UnsupportedTypeError(BridgeError):
    """Raised for Kudu column types with no Hive counterpart."""


class DependencyResolutionError(BridgeError):
    """Raised when a class's code artifact cannot be shipped with a job."""


class CredentialFormatError(BridgeError):
    """Raised for unreadable or malformed token storage files."""


class BridgeDependencyError(BridgeError):
    """Raised when an optional runtime dependency is missing."""


ConfigurationError = BridgeConfigError
IOFailure = KuduIOError
