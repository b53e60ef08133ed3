"""
Command line interface.

Usage:
    python -m padcheck [--padded-blocks always|never] [--config FILE] FILE...
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from padcheck.models import Diagnostic, LintResult
from padcheck.services.linter import Linter, UnsupportedFileError
from padcheck.services.rule_config import ConfigurationError, resolve_rule_settings
from padcheck.utils.logging import get_logger, log_error_with_context, setup_logging
from plugins.base import ParseError
from plugins.manager import get_plugin_manager

logger = get_logger(__name__)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    location = diagnostic.location
    # Editors expect 1-based columns
    return (
        f"{diagnostic.file_path}:{location.line}:{location.column + 1}: "
        f"{diagnostic.severity.value} [{diagnostic.rule_name}] {diagnostic.message}"
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="padcheck",
        description="Check blank-line padding inside blocks and switch statements.",
    )
    parser.add_argument("files", nargs="+", help="Source files to check.")
    parser.add_argument(
        "--padded-blocks",
        choices=["always", "never"],
        default=None,
        help="Require ('always') or forbid ('never') padding. Defaults to the configured setting.",
    )
    parser.add_argument("--config", default=None, help="YAML rule configuration file.")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level.")
    return parser.parse_args(argv)


async def lint_files(linter: Linter, files: List[Path]) -> List[LintResult]:
    results = []
    for path in files:
        results.append(await linter.lint_file(path))
    return results


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        rule_settings = resolve_rule_settings(
            padded_blocks=args.padded_blocks,
            config_file=args.config,
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    linter = Linter(get_plugin_manager(), rule_settings)
    files = [Path(path) for path in args.files]

    try:
        results = asyncio.run(lint_files(linter, files))
    except (UnsupportedFileError, ParseError, OSError, UnicodeDecodeError) as e:
        log_error_with_context(logger, "Lint run failed", e)
        print(f"Error: {e}", file=sys.stderr)
        return 2

    diagnostics = [d for result in results for d in result.diagnostics]
    error_count = sum(result.error_count for result in results)

    if args.format == "json":
        print(json.dumps([result.model_dump(mode="json") for result in results], indent=2))
    else:
        for diagnostic in diagnostics:
            print(format_diagnostic(diagnostic))
        if diagnostics:
            print(f"\nFound {len(diagnostics)} padding problem(s).", file=sys.stderr)
        else:
            print(f"Padding checks passed for {len(files)} file(s).")

    return 1 if error_count else 0
