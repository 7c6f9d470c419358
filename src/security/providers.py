"""Ambient credential providers."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from core.config import BridgeConfig
from security.credentials import Credentials
from security.token_storage import read_token_file


class StaticCredentialProvider:
    """Provider backed by an in-memory credential sequence."""

    def __init__(self, credentials: Sequence[Credentials] | None) -> None:
        self._credentials = tuple(credentials) if credentials is not None else None

    def current_credentials(self) -> Sequence[Credentials] | None:
        return self._credentials


class TokenFileCredentialProvider:
    """Provider reading a Hadoop token storage file at call time."""

    def __init__(self, token_file: Path | None) -> None:
        self._token_file = token_file

    @classmethod
    def from_config(cls, config: BridgeConfig) -> "TokenFileCredentialProvider":
        """Build a provider for the process token file location."""
        return cls(config.token_file)

    def current_credentials(self) -> Sequence[Credentials] | None:
        """Read the token file, or return None when no file is configured.

        Raises:
            CredentialFormatError: If the file is unreadable or malformed.
        """
        if self._token_file is None:
            return None
        return (read_token_file(self._token_file),)
