"""CLI command listing delegation tokens in a token storage file."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from core.config import BridgeConfig
from core.constants import TOKEN_FILE_ENV_VAR
from core.errors import BridgeConfigError
from security.token_storage import read_token_file


def add_inspect_tokens_command(subparsers: Any) -> None:
    """Register inspect-tokens subcommand."""
    parser = subparsers.add_parser(
        "inspect-tokens",
        help="List alias, kind, and service of stored delegation tokens",
    )
    parser.add_argument("--token-file", help=f"Token storage file, defaults to {TOKEN_FILE_ENV_VAR}")


def run_inspect_tokens_command(args: argparse.Namespace) -> int:
    """Print one tab-separated row per token; secrets are never printed."""
    token_file = Path(args.token_file) if args.token_file else BridgeConfig.from_env().token_file
    if token_file is None:
        raise BridgeConfigError(
            f"No token file given. Pass --token-file or set {TOKEN_FILE_ENV_VAR}."
        )
    credentials = read_token_file(token_file)
    for alias, token in credentials.tokens.items():
        print(f"{alias}\t{token.kind}\t{token.service}")
    return 0
