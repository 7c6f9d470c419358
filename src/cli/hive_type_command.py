"""CLI command for Kudu to Hive type conversion."""

from __future__ import annotations

import argparse
from typing import Any

from schema.kudu_types import ColumnTypeAttributes
from schema.type_mapping import to_hive_type


def add_hive_type_command(subparsers: Any) -> None:
    """Register hive-type subcommand."""
    parser = subparsers.add_parser("hive-type", help="Print the Hive type for a Kudu column type")
    parser.add_argument("kudu_type", help="Kudu type name, e.g. INT32 or DECIMAL")
    parser.add_argument("--precision", type=int, help="Decimal precision")
    parser.add_argument("--scale", type=int, default=0, help="Decimal scale")


def run_hive_type_command(args: argparse.Namespace) -> int:
    """Print the Hive type name."""
    attributes = None
    if args.precision is not None:
        attributes = ColumnTypeAttributes(precision=args.precision, scale=args.scale)
    print(to_hive_type(args.kudu_type, attributes).type_name)
    return 0
