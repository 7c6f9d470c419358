"""Kudu master address resolution.

This module resolves the master addresses a Kudu client connects to,
preferring the table-scoped setting over the cluster-wide default.
"""

from __future__ import annotations

from typing import Mapping

from conf.job_conf import JobConf
from core.constants import DEFAULT_KUDU_MASTER_PORT, KUDU_MASTER_ADDRS_KEY, KUDU_MASTER_ADDRS_KEY_DEFAULT
from core.errors import BridgeConfigError


def get_master_addresses(
    conf: Mapping[str, str],
    key: str = KUDU_MASTER_ADDRS_KEY,
    default_key: str = KUDU_MASTER_ADDRS_KEY_DEFAULT,
) -> str:
    """Resolve the Kudu master addresses from configuration.

    Args:
        conf: Overlayed job configuration.
        key: Table or job scoped master addresses key.
        default_key: Key holding the globally configured default.

    Returns:
        Comma-joined master addresses string.

    Raises:
        BridgeConfigError: If neither key holds a non-empty value.
    """
    master_addresses = conf.get(key)
    if not master_addresses:
        master_addresses = conf.get(default_key)
    if not master_addresses:
        raise BridgeConfigError(
            f"Kudu master addresses are not specified in the table property ({key}), "
            f"or default configuration ({default_key}). Set one of them to a "
            "comma-separated list of host:port pairs."
        )
    return master_addresses


def with_default_master_addresses(
    conf: Mapping[str, str],
    default_master_addresses: str | None,
    default_key: str = KUDU_MASTER_ADDRS_KEY_DEFAULT,
) -> JobConf:
    """Seed the default master key from the process default when absent.

    Args:
        conf: Job configuration, left unmodified.
        default_master_addresses: Process-wide default, usually
            ``BridgeConfig.default_master_addresses``.
        default_key: Key holding the globally configured default.

    Returns:
        A new configuration. A non-empty value already under the
        default key is kept.
    """
    seeded = JobConf(conf)
    if default_master_addresses and not seeded.get(default_key):
        seeded[default_key] = default_master_addresses
    return seeded


def split_master_addresses(master_addresses: str) -> list[tuple[str, int]]:
    """Split a master addresses string into host and port pairs.

    IPv6 hosts must be bracketed, e.g. ``[::1]:7051``.

    Args:
        master_addresses: Comma-joined ``host[:port]`` entries.

    Returns:
        Host and port pairs, using the default master port when absent.

    Raises:
        BridgeConfigError: If an entry has an empty host, a bad port,
            or an unbracketed IPv6 host.
    """
    pairs: list[tuple[str, int]] = []
    for entry in master_addresses.split(","):
        entry = entry.strip()
        if not entry:
            continue
        host, port_value = _split_host_port(entry)
        if not host:
            raise BridgeConfigError(f"Invalid Kudu master address '{entry}': host is empty.")
        if not port_value:
            pairs.append((host, DEFAULT_KUDU_MASTER_PORT))
            continue
        try:
            pairs.append((host, int(port_value)))
        except ValueError as error:
            raise BridgeConfigError(
                f"Invalid Kudu master address '{entry}': port must be numeric."
            ) from error
    if not pairs:
        raise BridgeConfigError(f"No Kudu master addresses found in '{master_addresses}'.")
    return pairs


def _split_host_port(entry: str) -> tuple[str, str]:
    if entry.startswith("["):
        host, bracket, remainder = entry[1:].partition("]")
        if not bracket or (remainder and not remainder.startswith(":")):
            raise BridgeConfigError(f"Invalid Kudu master address '{entry}': malformed IPv6 brackets.")
        return host, remainder[1:]
    if entry.count(":") > 1:
        raise BridgeConfigError(
            f"Invalid Kudu master address '{entry}': IPv6 hosts must be bracketed, e.g. [::1]:7051."
        )
    host, _, port_value = entry.partition(":")
    return host, port_value
