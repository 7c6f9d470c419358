"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import BridgeConfig
from core.errors import BridgeConfigError


def test_from_env_reads_token_file(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Config should resolve the token file from environment."""
    monkeypatch.setenv("HADOOP_TOKEN_FILE_LOCATION", str(tmp_path / "tokens.bin"))

    config = BridgeConfig.from_env()

    assert config.token_file == (tmp_path / "tokens.bin").resolve()


def test_from_env_without_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables should leave optional settings empty."""
    monkeypatch.delenv("HADOOP_TOKEN_FILE_LOCATION", raising=False)
    monkeypatch.delenv("HIVE_KUDU_MASTER_ADDRESSES_DEFAULT", raising=False)

    config = BridgeConfig.from_env()

    assert config.token_file is None and config.default_master_addresses is None


def test_from_env_strips_default_master_addresses(monkeypatch: pytest.MonkeyPatch) -> None:
    """Blank default master addresses should be treated as unset."""
    monkeypatch.setenv("HIVE_KUDU_MASTER_ADDRESSES_DEFAULT", "   ")

    config = BridgeConfig.from_env()

    assert config.default_master_addresses is None


def test_from_env_rejects_directory_token_file(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path,
) -> None:
    """Config should fail when the token file location is a directory."""
    monkeypatch.setenv("HADOOP_TOKEN_FILE_LOCATION", str(tmp_path))

    with pytest.raises(BridgeConfigError):
        BridgeConfig.from_env()
