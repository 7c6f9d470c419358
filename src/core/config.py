"""Runtime configuration model for the bridge.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import MASTER_ADDRESSES_DEFAULT_ENV_VAR, TOKEN_FILE_ENV_VAR
from core.errors import BridgeConfigError


@dataclass(frozen=True)
class BridgeConfig:
    """Validated process-level configuration.

    Attributes:
        token_file: Optional Hadoop token storage file holding ambient
            delegation tokens for the current process.
        default_master_addresses: Optional cluster-wide fallback for
            Kudu master addresses.
    """

    token_file: Path | None
    default_master_addresses: str | None

    @classmethod
    def from_env(cls) -> "BridgeConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            BridgeConfigError: If environment values are invalid.
        """
        token_file_value = os.getenv(TOKEN_FILE_ENV_VAR)
        default_masters = os.getenv(MASTER_ADDRESSES_DEFAULT_ENV_VAR)
        return cls(
            token_file=_parse_token_file(token_file_value),
            default_master_addresses=_parse_master_addresses(default_masters),
        )


def _parse_token_file(raw_value: str | None) -> Path | None:
    """Parse the token file location environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Resolved path, or None when unset.

    Raises:
        BridgeConfigError: If the value is set but points at a directory.
    """
    if not raw_value:
        return None
    token_path = Path(raw_value).expanduser().resolve()
    if token_path.is_dir():
        raise BridgeConfigError(
            f"Invalid {TOKEN_FILE_ENV_VAR} value: '{raw_value}' is a directory. "
            "Point it at a Hadoop token storage file."
        )
    return token_path


def _parse_master_addresses(raw_value: str | None) -> str | None:
    """Normalize the default master addresses environment value."""
    if raw_value is None:
        return None
    stripped = raw_value.strip()
    return stripped or None
