"""Kudu client factory.

This module resolves master addresses, builds a client through an
injectable builder, and imports ambient credentials into it. Client
handles are never cached; each call opens a new connection owned by
the caller.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol

from conf.master_addresses import (
    get_master_addresses,
    split_master_addresses,
    with_default_master_addresses,
)
from core.config import BridgeConfig
from core.errors import BridgeDependencyError, BridgeError, KuduIOError
from core.logging_config import get_logger
from security.credential_import import import_credentials
from security.credentials import CredentialProvider
from security.providers import TokenFileCredentialProvider

_LOGGER = get_logger(__name__)


class KuduClientHandle(Protocol):
    """Connected Kudu client as seen by the bridge."""

    def master_addresses_as_string(self) -> str:
        """Return the comma-joined master addresses the client targets."""

    def import_authentication_credentials(self, authn_data: bytes) -> None:
        """Import a previously obtained authentication secret."""


KuduClientBuilder = Callable[[str], KuduClientHandle]


class KuduPythonClient:
    """Handle wrapping a ``kudu-python`` client connection."""

    def __init__(self, master_addresses: str, client: Any) -> None:
        self._master_addresses = master_addresses
        self.client = client

    def master_addresses_as_string(self) -> str:
        return self._master_addresses

    def import_authentication_credentials(self, authn_data: bytes) -> None:
        """Forward the secret to the underlying client.

        Raises:
            BridgeDependencyError: If the installed client cannot import
                authentication credentials.
        """
        importer = getattr(self.client, "import_authentication_credentials", None)
        if importer is None:
            raise BridgeDependencyError(
                "The installed kudu client cannot import authentication credentials. "
                "Upgrade kudu-python or run the job without a Kudu delegation token."
            )
        importer(authn_data)

    def close(self) -> None:
        """Close the wrapped client connection."""
        self.client.close()


def build_kudu_python_client(master_addresses: str) -> KuduClientHandle:
    """Connect to Kudu masters with ``kudu-python``.

    Args:
        master_addresses: Comma-joined ``host:port`` entries.

    Returns:
        Connected client handle.

    Raises:
        BridgeDependencyError: If kudu-python is missing.
    """
    try:
        import kudu  # type: ignore[import-not-found]
    except ImportError as error:
        raise BridgeDependencyError(
            "Connecting to Kudu requires kudu-python, but it is not installed. "
            "Install the 'kudu' extra to build Kudu clients."
        ) from error
    pairs = split_master_addresses(master_addresses)
    client = kudu.connect(host=[host for host, _ in pairs], port=[port for _, port in pairs])
    return KuduPythonClient(master_addresses, client)


def get_kudu_client(
    conf: Mapping[str, str],
    builder: KuduClientBuilder | None = None,
    credential_provider: CredentialProvider | None = None,
) -> KuduClientHandle:
    """Build a Kudu client for a configuration and import credentials.

    Args:
        conf: Overlayed job configuration.
        builder: Client builder, defaults to the kudu-python builder.
        credential_provider: Ambient credential source, defaults to the
            process token file.

    Returns:
        Connected client handle owned by the caller.

    Raises:
        BridgeConfigError: If master addresses are not configured.
        BridgeDependencyError: If the client library is missing.
        KuduIOError: If the client cannot be built or connected.
        CredentialFormatError: If the ambient token file is malformed.
            The freshly built handle is closed before the error propagates.
    """
    config = BridgeConfig.from_env()
    seeded_conf = with_default_master_addresses(conf, config.default_master_addresses)
    master_addresses = get_master_addresses(seeded_conf)
    provider = credential_provider or TokenFileCredentialProvider.from_config(config)
    client_builder = builder or build_kudu_python_client
    try:
        client = client_builder(master_addresses)
    except BridgeError:
        raise
    except Exception as error:
        raise KuduIOError(
            f"Failed to connect to Kudu masters {master_addresses}: {error}. "
            "Check that the masters are reachable and retry."
        ) from error
    _LOGGER.info("kudu_client_created", master_addresses=master_addresses)
    try:
        import_credentials(client, provider)
    except BaseException:
        _close_quietly(client)
        raise
    return client


def _close_quietly(client: KuduClientHandle) -> None:
    """Close a handle that will not reach the caller."""
    close = getattr(client, "close", None)
    if close is None:
        return
    try:
        close()
    except Exception as error:
        _LOGGER.warning("kudu_client_close_failed", error=str(error))
