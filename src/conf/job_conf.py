"""Ordered string configuration used by Hive jobs.

This module models a Hadoop-style job configuration: an ordered
mapping of string keys to string values with collection helpers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Mapping, MutableMapping, cast

from core.errors import BridgeConfigError, BridgeDependencyError


class JobConf(MutableMapping[str, str]):
    """Insertion-ordered ``str -> str`` job configuration."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = {}
        if values:
            for key, value in values.items():
                self[key] = value

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __setitem__(self, key: str, value: str) -> None:
        if not isinstance(key, str) or not isinstance(value, str):
            raise BridgeConfigError(
                f"Configuration entries must be strings, got {key!r}={value!r}."
            )
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"JobConf({self._values!r})"

    def copy(self) -> "JobConf":
        """Return an independent copy of this configuration."""
        return JobConf(self._values)

    def get_strings(self, key: str) -> list[str]:
        """Read a comma-separated collection value.

        Args:
            key: Configuration key.

        Returns:
            Trimmed, non-empty entries in stored order.
        """
        raw_value = self._values.get(key, "")
        return [part.strip() for part in raw_value.split(",") if part.strip()]

    def set_strings(self, key: str, values: Iterable[str]) -> None:
        """Write a collection value as a comma-joined string."""
        self[key] = ",".join(values)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "JobConf":
        """Load a flat YAML mapping of settings.

        Args:
            path: YAML file path.

        Returns:
            Configuration holding the file's entries in file order.

        Raises:
            BridgeDependencyError: If PyYAML is unavailable.
            BridgeConfigError: If the file is unreadable or not a flat mapping.
        """
        try:
            import yaml  # type: ignore[import-untyped]
        except ImportError as error:
            raise BridgeDependencyError(
                "YAML configuration files require PyYAML. Install with 'pip install pyyaml'."
            ) from error
        conf_path = Path(path)
        try:
            payload = cast(object, yaml.safe_load(conf_path.read_text(encoding="utf-8")))
        except (OSError, yaml.YAMLError) as error:
            raise BridgeConfigError(
                f"Failed to read configuration file {conf_path}: {error}."
            ) from error
        if payload is None:
            return cls()
        if not isinstance(payload, dict):
            raise BridgeConfigError(
                f"Configuration file {conf_path} must contain a mapping at its root."
            )
        return cls({str(key): _scalar_to_str(conf_path, str(key), value) for key, value in payload.items()})


def _scalar_to_str(conf_path: Path, key: str, value: object) -> str:
    """Render one YAML scalar the way Hadoop stores it."""
    if isinstance(value, (dict, list)):
        raise BridgeConfigError(
            f"Configuration key '{key}' in {conf_path} has a nested value. "
            "Only flat key/value pairs are supported."
        )
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)
