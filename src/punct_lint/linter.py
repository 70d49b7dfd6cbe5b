# SPDX-License-Identifier: Apache-2.0
"""
File runner — read each document, classify it, optionally rewrite it.

Results are aggregated into a LintSummary so that the caller sees every
file before deciding on an exit status.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable

from pydantic import BaseModel, Field

from punct_lint.scanner import apply_fixes, has_violations, locate_matches

logger = logging.getLogger(__name__)


# ============================================================================
# Exceptions
# ============================================================================


class PunctLintError(Exception):
    """Base exception for punct-lint operations."""

    # Set by lint_files when a run aborts: everything processed so far
    summary: LintSummary | None = None


class DocumentReadError(PunctLintError):
    """Raised when a document cannot be read as UTF-8 text."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class DocumentWriteError(PunctLintError):
    """Raised when a fixed document cannot be written back."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason}")


# ============================================================================
# Pydantic models
# ============================================================================


class FileStatus(str, Enum):
    CLEAN = "clean"
    FIXED = "fixed"
    ERRORED = "errored"


class Coordinate(BaseModel):
    line: int  # 1-based
    column: int  # 1-based
    char: str


class FileScanResult(BaseModel):
    path: str
    status: FileStatus
    coordinates: list[Coordinate] = Field(default_factory=list)


class FileFailure(BaseModel):
    path: str
    reason: str


class LintSummary(BaseModel):
    fix: bool = False
    pattern: str = ""
    results: list[FileScanResult] = Field(default_factory=list)
    failures: list[FileFailure] = Field(default_factory=list)

    @property
    def scanned_count(self) -> int:
        return len(self.results) + len(self.failures)

    @property
    def fixed_file_count(self) -> int:
        return sum(1 for r in self.results if r.status is FileStatus.FIXED)

    @property
    def error_file_count(self) -> int:
        return sum(1 for r in self.results if r.status is FileStatus.ERRORED)

    @property
    def error_count(self) -> int:
        return sum(len(r.coordinates) for r in self.results)

    @property
    def ok(self) -> bool:
        """Fix mode passes unless I/O failed; detection also needs zero matches."""
        if self.failures:
            return False
        return self.fix or self.error_file_count == 0


# ============================================================================
# I/O helpers
# ============================================================================


def _read_text(path: Path) -> str:
    # Decode bytes directly so "\r\n" survives a fix round trip
    try:
        return path.read_bytes().decode("utf-8")
    except OSError as exc:
        raise DocumentReadError(str(path), str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise DocumentReadError(str(path), f"not valid UTF-8 ({exc.reason})") from exc


def _write_text(path: Path, content: str) -> None:
    try:
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as exc:
        raise DocumentWriteError(str(path), str(exc)) from exc


# ============================================================================
# Public API
# ============================================================================


def lint_file(path: Path, *, fix: bool = False, display_path: str | None = None) -> FileScanResult:
    """Scan one document; rewrite it in fix mode."""
    shown = display_path or str(path)
    content = _read_text(path)
    if not has_violations(content):
        return FileScanResult(path=shown, status=FileStatus.CLEAN)
    if fix:
        _write_text(path, apply_fixes(content))
        logger.info("Fixed %s", shown)
        return FileScanResult(path=shown, status=FileStatus.FIXED)
    coordinates = [
        Coordinate(line=c.line, column=c.column, char=c.char)
        for c in locate_matches(content)
    ]
    logger.debug("%s: %d match(es)", shown, len(coordinates))
    return FileScanResult(path=shown, status=FileStatus.ERRORED, coordinates=coordinates)


def lint_files(
    paths: Iterable[Path],
    *,
    fix: bool = False,
    pattern: str = "",
    keep_going: bool = False,
    display_paths: dict[Path, str] | None = None,
) -> LintSummary:
    """Lint documents in order and aggregate the results.

    A failing file is recorded in summary.failures. Without keep_going the
    run stops there and the error is re-raised with the partial summary
    attached as exc.summary, so files already rewritten can still be
    reported.
    """
    summary = LintSummary(fix=fix, pattern=pattern)
    shown = display_paths or {}
    for path in paths:
        try:
            result = lint_file(path, fix=fix, display_path=shown.get(path))
        except PunctLintError as exc:
            summary.failures.append(FileFailure(path=shown.get(path, str(path)), reason=str(exc)))
            if not keep_going:
                exc.summary = summary
                raise
            logger.error("%s", exc)
            continue
        summary.results.append(result)
    return summary
