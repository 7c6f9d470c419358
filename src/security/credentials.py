"""Credential and token models.

Credential providers give read-only access to the delegation tokens
available to the current process. They are injected into the importer
so tests can supply synthetic credential sets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Protocol, Sequence


@dataclass(frozen=True)
class SecurityToken:
    """Delegation token identified by kind and service.

    Attributes:
        identifier: Opaque token identifier bytes.
        password: Opaque secret payload imported into clients.
        kind: Protocol family, e.g. ``kudu-authn-data``.
        service: Target service, for Kudu the master addresses string.
    """

    identifier: bytes
    password: bytes
    kind: str
    service: str


@dataclass(frozen=True)
class Credentials:
    """One credential object: ordered tokens and secret keys by alias."""

    tokens: Mapping[str, SecurityToken] = field(default_factory=dict)
    secret_keys: Mapping[str, bytes] = field(default_factory=dict)

    def all_tokens(self) -> Iterator[SecurityToken]:
        """Yield tokens in insertion order."""
        yield from self.tokens.values()


class CredentialProvider(Protocol):
    """Read-only source of the current principal's credentials."""

    def current_credentials(self) -> Sequence[Credentials] | None:
        """Return credentials in a stable order, or None without a context."""
