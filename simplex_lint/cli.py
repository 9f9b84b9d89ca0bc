# SPDX-License-Identifier: MIT
"""
Simplex Lint CLI

Command-line interface for linting Simplex specification files.

Usage:
    simplex-lint spec.md
    simplex-lint specs/*.md --format json
    cat spec.md | simplex-lint -

Exit codes:
    0  every spec is valid
    1  at least one spec is invalid
    2  a file could not be read or an option is out of range
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO, Tuple

from . import __version__
from .config import ConfigError, LintConfig
from .linter import Linter
from .result import LintResult, MultiResult

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_FAILURE = 2

STDIN_NAME = "<stdin>"


def read_file(path: str) -> str:
    """
    Read a file and return its contents.

    Args:
        path: Path to the file

    Returns:
        File contents as string

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def read_inputs(paths: List[str], stdin: TextIO) -> List[Tuple[str, str]]:
    """
    Collect (name, content) pairs; no paths or a lone "-" means stdin.

    Raises:
        OSError: If a file cannot be read
        UnicodeDecodeError: If a file is not UTF-8
    """
    if not paths or paths == ["-"]:
        return [(STDIN_NAME, stdin.read())]
    return [(path, read_file(path)) for path in paths]


def format_results(results: List[LintResult], output_format: str) -> str:
    """Render one result on its own, or several as a MultiResult."""
    if len(results) == 1:
        result = results[0]
        return result.to_json() + "\n" if output_format == "json" else result.to_text()

    multi = MultiResult(results=results)
    return multi.to_json() + "\n" if output_format == "json" else multi.to_text()


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser for the CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="simplex-lint",
        description=(
            "Validate Simplex specification files for structural correctness "
            "and complexity limits"
        ),
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Spec files to lint (reads stdin when omitted or '-')",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument("--max-rules", type=int, help="Override max RULES items")
    parser.add_argument("--max-inputs", type=int, help="Override max function inputs")
    parser.add_argument(
        "--max-rule-length", type=int, help="Override max length of a single rule"
    )
    parser.add_argument(
        "--max-functions", type=int, help="Override FUNCTION count warning threshold"
    )
    parser.add_argument(
        "--no-llm",
        action="store_true",
        help="Skip semantic checks (offline mode)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show detailed check progress on stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv)
        stdin: Input stream for "-" (defaults to sys.stdin)
        stdout: Output stream (defaults to sys.stdout)

    Returns:
        Exit code
    """
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = LintConfig.from_overrides(
            max_rules=args.max_rules,
            max_inputs=args.max_inputs,
            max_rule_length=args.max_rule_length,
            max_functions=args.max_functions,
            no_llm=args.no_llm,
            verbose=args.verbose,
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        inputs = read_inputs(args.files, stdin)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return EXIT_FAILURE
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read input: {e}", file=sys.stderr)
        return EXIT_FAILURE

    linter = Linter(config)
    results = [linter.lint(name, content) for name, content in inputs]

    stdout.write(format_results(results, args.format))

    if all(r.valid for r in results):
        return EXIT_VALID
    return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
