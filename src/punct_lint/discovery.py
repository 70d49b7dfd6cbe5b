# SPDX-License-Identifier: Apache-2.0
"""Resolve the documents to lint: explicit paths, or the docs glob."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_DOCS_PATTERN = "docs/**/*.md"


def default_root() -> Path:
    """Base directory from PUNCT_LINT_ROOT, else the working directory."""
    return Path(os.environ.get("PUNCT_LINT_ROOT", "") or Path.cwd())


def resolve_path(path: str | os.PathLike[str], root: Path) -> Path:
    """Absolute paths pass through; relative ones are joined onto root."""
    p = Path(path)
    return p if p.is_absolute() else root / p


def expand_pattern(pattern: str, root: Path) -> list[Path]:
    """Glob pattern under root, sorted for a stable report order."""
    found = sorted(p for p in root.glob(pattern) if p.is_file())
    logger.debug("Pattern %s under %s matched %d file(s)", pattern, root, len(found))
    return found


def discover(
    paths: list[str] | None,
    *,
    root: Path | None = None,
    pattern: str = DEFAULT_DOCS_PATTERN,
) -> list[Path]:
    """Explicit paths win (e.g. from a pre-commit hook); otherwise glob.

    An empty glob is not an error: the run simply scans zero files.
    """
    base = root if root is not None else default_root()
    if paths:
        return [resolve_path(p, base) for p in paths]
    found = expand_pattern(pattern, base)
    if not found:
        logger.warning("No documents match %s under %s", pattern, base)
    return found
