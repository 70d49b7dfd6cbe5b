# SPDX-License-Identifier: Apache-2.0
"""
Detect, locate and fix full-width punctuation in a block of text.

All functions are pure: they take the text and return new values.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Iterator

from punct_lint.punctuation_table import (
    CHECKER_PATTERN,
    PUNCTUATION_TABLE,
    SubstitutionRule,
)


# ============================================================================
# Data structures
# ============================================================================


@dataclass(frozen=True, slots=True)
class MatchCoordinate:
    line: int  # 1-based
    column: int  # 1-based, in characters
    char: str


# ============================================================================
# Line/col helper
# ============================================================================


def _line_cols(content: str, offsets: Iterable[int]) -> Iterator[tuple[int, int]]:
    """Yield (1-based line, 1-based col) for ascending offsets in one pass."""
    line, line_start, scanned = 1, 0, 0
    for offset in offsets:
        newlines = content.count("\n", scanned, offset)
        if newlines:
            line += newlines
            line_start = content.rfind("\n", scanned, offset) + 1
        scanned = offset
        yield line, offset - line_start + 1


def _apply_rule(content: str, rule: SubstitutionRule) -> str:
    return rule.pattern.sub(rule.replacement, content)


# ============================================================================
# Public API
# ============================================================================


def has_violations(content: str) -> bool:
    """True if any rule matches anywhere in content."""
    return CHECKER_PATTERN.search(content) is not None


def apply_fixes(content: str) -> str:
    """Apply every rule in table order, each over the previous result."""
    return reduce(_apply_rule, PUNCTUATION_TABLE, content)


def locate_matches(content: str) -> list[MatchCoordinate]:
    """Return every match of the combined checker in document order."""
    starts = [m.start() for m in CHECKER_PATTERN.finditer(content)]
    return [
        MatchCoordinate(line=line, column=col, char=content[start])
        for start, (line, col) in zip(starts, _line_cols(content, starts))
    ]


def count_by_rule(content: str) -> dict[str, int]:
    """Count matches per rule, each pattern scanning the input independently."""
    return {
        rule.name: sum(1 for _ in rule.pattern.finditer(content))
        for rule in PUNCTUATION_TABLE
    }


def coordinates_to_dicts(coordinates: list[MatchCoordinate]) -> list[dict]:
    """Serialize coordinates for JSON response."""
    return [
        {"line": c.line, "column": c.column, "char": c.char}
        for c in coordinates
    ]
