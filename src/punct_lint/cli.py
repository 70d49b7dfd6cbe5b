# SPDX-License-Identifier: Apache-2.0
"""
Command-line entry point.

Run with: punct-lint [--fix] [--keep-going] [paths ...]

With no paths, every file matching the docs pattern under the root is
scanned. Paths given explicitly (e.g. by a pre-commit hook) are linted as-is.

Configuration via environment variables:
    PUNCT_LINT_DOCS_PATTERN - Glob for documents (default: "docs/**/*.md")
    PUNCT_LINT_ROOT         - Base dir for relative paths (default: cwd)
    PUNCT_LINT_LOG_LEVEL    - Logging level (default: "WARNING")

Exit codes: 0 clean or fixed, 1 punctuation found, 2 I/O failure.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from punct_lint import __version__
from punct_lint.discovery import DEFAULT_DOCS_PATTERN, default_root, discover
from punct_lint.linter import FileStatus, LintSummary, PunctLintError, lint_files

logger = logging.getLogger(__name__)

# ============================================================================
# Configuration from environment
# ============================================================================

PUNCT_LINT_DOCS_PATTERN = os.environ.get("PUNCT_LINT_DOCS_PATTERN", DEFAULT_DOCS_PATTERN)
PUNCT_LINT_LOG_LEVEL = os.environ.get("PUNCT_LINT_LOG_LEVEL", "WARNING")

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_IO_ERROR = 2

_STATUS_MARKS = {
    FileStatus.CLEAN: "✅",
    FileStatus.FIXED: "🔧",
    FileStatus.ERRORED: "❌",
}


# ============================================================================
# Report
# ============================================================================


def print_report(summary: LintSummary) -> None:
    """Write the human-readable report to stdout."""
    if summary.fix:
        print("Punctuation Linting (fix mode):")
    else:
        print("Punctuation Linting:")

    for result in summary.results:
        print(f"[start] {result.path} {_STATUS_MARKS[result.status]}")
        for c in result.coordinates:
            print(f"       📌 {result.path}:{c.line}:{c.column}\t{c.char}")
    for failure in summary.failures:
        print(f"[start] {failure.path} ⚠️  {failure.reason}")

    print(f"Scanning: {summary.scanned_count} file(s)")
    print(f"Finding: {summary.pattern}")

    if not summary.fix:
        if summary.error_file_count:
            print(
                f"Summary: {summary.error_count} error(s) in {summary.error_file_count} "
                "file(s) found. Please check the log above.\n"
            )
        elif not summary.failures:
            print("No error found.\n")
    elif summary.fixed_file_count:
        print(f"Summary: {summary.fixed_file_count} file(s) fixed\n")
    elif not summary.failures:
        print("No error found.\n")

    if summary.failures:
        print(f"Failed: {len(summary.failures)} file(s) could not be processed.\n")


def resolve_log_level(name: str) -> int:
    """Map a level name to its number; unknown names fall back to WARNING."""
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    print(f"punct-lint: unknown log level {name!r}, using WARNING", file=sys.stderr)
    return logging.WARNING


def exit_code_for(summary: LintSummary) -> int:
    if summary.failures:
        return EXIT_IO_ERROR
    return EXIT_OK if summary.ok else EXIT_VIOLATIONS


# ============================================================================
# CLI Entry Point
# ============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="punct-lint",
        description="Report or fix full-width punctuation in documentation files.",
    )
    parser.add_argument("paths", nargs="*", help="Files to lint (default: glob the docs pattern)")
    parser.add_argument("--fix", action="store_true", help="Rewrite files in place")
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Record unreadable/unwritable files and continue instead of aborting",
    )
    parser.add_argument("--root", type=Path, default=None, help="Base dir (default: PUNCT_LINT_ROOT or cwd)")
    parser.add_argument("--pattern", default=None, help=f"Docs glob (default: {PUNCT_LINT_DOCS_PATTERN})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the linter and return the process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else resolve_log_level(PUNCT_LINT_LOG_LEVEL),
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = args.root if args.root is not None else default_root()
    pattern = args.pattern or PUNCT_LINT_DOCS_PATTERN

    try:
        files = discover(args.paths, root=root, pattern=pattern)
        if args.paths:
            display = dict(zip(files, args.paths))
        else:
            display = {f: str(f.relative_to(root)) for f in files}
        summary = lint_files(
            files,
            fix=args.fix,
            pattern=pattern,
            keep_going=args.keep_going,
            display_paths=display,
        )
    except PunctLintError as exc:
        logger.error("%s", exc)
        if exc.summary is not None:
            print_report(exc.summary)
        print(f"punct-lint: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    print_report(summary)
    return exit_code_for(summary)


if __name__ == "__main__":
    sys.exit(main())
