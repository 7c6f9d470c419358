"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolated_bridge_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient tokens and cluster defaults of the host out of tests."""
    monkeypatch.delenv("HADOOP_TOKEN_FILE_LOCATION", raising=False)
    monkeypatch.delenv("HIVE_KUDU_MASTER_ADDRESSES_DEFAULT", raising=False)
