#!/usr/bin/env python3
"""Command line entry point.

Usage example:
    tokenlist-colors plyrapi.tokenlist.json --preview token_colors.html
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import colorama

from tokenlist_colors.config import Settings
from tokenlist_colors.driver import run
from tokenlist_colors.reporter import ConsoleReporter, setup_logging


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Add logo colors to a token list and render an HTML preview")
    parser.add_argument("input", nargs="?", default=defaults.input_path, help="Token list JSON, rewritten in place")
    parser.add_argument("--preview", default=defaults.preview_path, help="HTML preview output path")
    parser.add_argument("--tokens-key", default=defaults.tokens_key)
    parser.add_argument("--logo-field", default=defaults.logo_field)
    parser.add_argument("--symbol-field", default=defaults.symbol_field)
    parser.add_argument("--timeout", type=float, default=defaults.timeout, help="Per-download timeout in seconds")
    parser.add_argument("--max-bytes", type=int, default=defaults.max_bytes, help="Largest logo accepted")
    parser.add_argument("--user-agent", default=defaults.user_agent)
    parser.add_argument("--dry-run", action="store_true", help="Process tokens but write nothing")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--quiet", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser(Settings.from_env()).parse_args(argv)
    colorama.just_fix_windows_console()
    setup_logging(args.quiet, args.verbose)
    settings = Settings(
        input_path=args.input,
        preview_path=args.preview,
        tokens_key=args.tokens_key,
        logo_field=args.logo_field,
        symbol_field=args.symbol_field,
        timeout=args.timeout,
        max_bytes=args.max_bytes,
        user_agent=args.user_agent,
        dry_run=args.dry_run,
    )
    return run(settings, reporter=ConsoleReporter())


if __name__ == "__main__":
    sys.exit(main())
