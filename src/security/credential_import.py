"""Delegation token import for Kudu clients.

A job that reads from one Kudu cluster and writes to another carries
one token per cluster, so only the token whose service matches the
client's master addresses is imported.
"""

from __future__ import annotations

from typing import Iterator, Protocol, Sequence

from core.constants import KUDU_TOKEN_KIND
from core.logging_config import get_logger
from security.credentials import CredentialProvider, Credentials, SecurityToken

_LOGGER = get_logger(__name__)


class AuthenticatableClient(Protocol):
    """Client surface needed for credential import."""

    def master_addresses_as_string(self) -> str:
        """Return the client's service identifier."""

    def import_authentication_credentials(self, authn_data: bytes) -> None:
        """Import a previously obtained authentication secret."""


def import_credentials(client: AuthenticatableClient, provider: CredentialProvider) -> bool:
    """Import the matching Kudu token of the current principal, if any.

    Args:
        client: Freshly built client.
        provider: Read-only source of ambient credentials.

    Returns:
        True when a token was imported, False otherwise.
    """
    credential_set = provider.current_credentials()
    if credential_set is None:
        return False
    service = client.master_addresses_as_string()
    token = find_kudu_token(credential_set, service)
    if token is None:
        return False
    _LOGGER.debug("credentials_imported", service=service)
    client.import_authentication_credentials(token.password)
    return True


def find_kudu_token(credential_set: Sequence[Credentials], service: str) -> SecurityToken | None:
    """Return the first Kudu token for a service.

    Credential objects are scanned in sequence order and tokens in
    insertion order; the first exact service match wins.
    """
    for token in _iter_tokens(credential_set):
        if token.kind != KUDU_TOKEN_KIND:
            continue
        if token.service != service:
            _LOGGER.debug("credentials_skipped", service=token.service, expected_service=service)
            continue
        return token
    return None


def _iter_tokens(credential_set: Sequence[Credentials]) -> Iterator[SecurityToken]:
    for credentials in credential_set:
        yield from credentials.all_tokens()
