"""Unit tests for job configuration."""

from __future__ import annotations

import pytest

from conf.job_conf import JobConf
from core.errors import BridgeConfigError


def test_copy_is_independent() -> None:
    """Copies should not share state with the original."""
    conf = JobConf({"a": "1"})

    copied = conf.copy()
    copied["a"] = "2"

    assert conf["a"] == "1" and copied["a"] == "2"


def test_get_strings_splits_and_trims() -> None:
    """Collection values should be split on commas without empties."""
    conf = JobConf({"tmpjars": " a.jar, ,b.jar,"})

    assert conf.get_strings("tmpjars") == ["a.jar", "b.jar"]


def test_get_strings_missing_key() -> None:
    """Missing collection keys should read as empty."""
    assert JobConf().get_strings("tmpjars") == []


def test_rejects_non_string_values() -> None:
    """Only string values should be accepted."""
    conf = JobConf()

    with pytest.raises(BridgeConfigError):
        conf["port"] = 7051  # type: ignore[assignment]


def test_from_yaml_reads_flat_mapping(tmp_path) -> None:
    """YAML files should load in file order with scalars rendered as strings."""
    conf_path = tmp_path / "job.yaml"
    conf_path.write_text(
        "kudu.master_addresses: m1:7051\nmapreduce.job.reduces: 4\nflag: true\n",
        encoding="utf-8",
    )

    conf = JobConf.from_yaml(conf_path)

    assert list(conf.items()) == [
        ("kudu.master_addresses", "m1:7051"),
        ("mapreduce.job.reduces", "4"),
        ("flag", "true"),
    ]


def test_from_yaml_rejects_nested_values(tmp_path) -> None:
    """Nested YAML values should fail."""
    conf_path = tmp_path / "job.yaml"
    conf_path.write_text("kudu:\n  master_addresses: m1\n", encoding="utf-8")

    with pytest.raises(BridgeConfigError):
        JobConf.from_yaml(conf_path)


def test_from_yaml_empty_file(tmp_path) -> None:
    """An empty YAML file should yield an empty configuration."""
    conf_path = tmp_path / "empty.yaml"
    conf_path.write_text("", encoding="utf-8")

    assert len(JobConf.from_yaml(conf_path)) == 0


def test_from_yaml_missing_file(tmp_path) -> None:
    """Missing files should raise a config error."""
    with pytest.raises(BridgeConfigError):
        JobConf.from_yaml(tmp_path / "missing.yaml")
