"""Hive/Kudu bridge CLI entry points.
This module exposes diagnostic commands for the bridge layer.
It maps argparse commands onto library calls.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from cli.hive_type_command import add_hive_type_command, run_hive_type_command
from cli.inspect_tokens_command import add_inspect_tokens_command, run_inspect_tokens_command
from cli.master_addresses_command import add_master_addresses_command, run_master_addresses_command
from core.errors import BridgeError


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="hive-kudu", description="Hive/Kudu bridge CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_master_addresses_command(subparsers)
    add_hive_type_command(subparsers)
    add_inspect_tokens_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the bridge CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return _dispatch(parser, args)
    except BridgeError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1


def _dispatch(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    if args.command == "master-addresses":
        return run_master_addresses_command(args)
    if args.command == "hive-type":
        return run_hive_type_command(args)
    if args.command == "inspect-tokens":
        return run_inspect_tokens_command(args)
    parser.error(f"Unsupported command: {args.command}")
    return 2
