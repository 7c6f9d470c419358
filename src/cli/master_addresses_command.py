"""CLI command for Kudu master address resolution."""

from __future__ import annotations

import argparse
from typing import Any

from conf.job_conf import JobConf
from conf.master_addresses import get_master_addresses, with_default_master_addresses
from conf.overlay import create_overlayed_conf
from core.config import BridgeConfig
from core.errors import BridgeConfigError


def add_master_addresses_command(subparsers: Any) -> None:
    """Register master-addresses subcommand."""
    parser = subparsers.add_parser(
        "master-addresses",
        help="Resolve Kudu master addresses from job and table settings",
    )
    parser.add_argument("--conf-file", help="Optional flat YAML job configuration file")
    parser.add_argument(
        "--set",
        dest="settings",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Job configuration entry, repeatable",
    )
    parser.add_argument(
        "--table-prop",
        dest="table_props",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Table property overriding job configuration, repeatable",
    )


def run_master_addresses_command(args: argparse.Namespace) -> int:
    """Print resolved master addresses."""
    conf = JobConf.from_yaml(args.conf_file) if args.conf_file else JobConf()
    conf = with_default_master_addresses(conf, BridgeConfig.from_env().default_master_addresses)
    conf.update(parse_key_values(args.settings))
    overlayed = create_overlayed_conf(conf, parse_key_values(args.table_props))
    print(get_master_addresses(overlayed))
    return 0


def parse_key_values(entries: list[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` arguments.

    Raises:
        BridgeConfigError: If an entry has no ``=`` or an empty key.
    """
    parsed: dict[str, str] = {}
    for entry in entries:
        key, separator, value = entry.partition("=")
        if not separator or not key.strip():
            raise BridgeConfigError(f"Invalid setting '{entry}': expected KEY=VALUE.")
        parsed[key.strip()] = value
    return parsed
