# SPDX-License-Identifier: Apache-2.0
"""
Full-width to half-width punctuation rules — pure module, no external deps.

The table is ordered; fixes are applied rule by rule in this order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Pattern


# ============================================================================
# Data structures
# ============================================================================


@dataclass(frozen=True, slots=True)
class SubstitutionRule:
    name: str
    pattern: Pattern[str]
    replacement: str


# ============================================================================
# Rules
# ============================================================================

PUNCTUATION_TABLE: tuple[SubstitutionRule, ...] = (
    # 逗号、顿号
    SubstitutionRule("comma", re.compile("，|、"), ","),
    # 句号
    SubstitutionRule("full_stop", re.compile("。"), "."),
    SubstitutionRule("question_mark", re.compile("？"), "?"),
    SubstitutionRule("colon", re.compile("："), ":"),
    SubstitutionRule("semicolon", re.compile("；"), ";"),
    SubstitutionRule("single_quote", re.compile("‘|’"), "'"),
    SubstitutionRule("double_quote", re.compile("“|”"), '"'),
    SubstitutionRule("left_paren", re.compile("（"), "("),
    SubstitutionRule("right_paren", re.compile("）"), ")"),
    SubstitutionRule("left_bracket", re.compile("【"), "["),
    SubstitutionRule("right_bracket", re.compile("】"), "]"),
    SubstitutionRule("left_angle", re.compile("《"), "<"),
    SubstitutionRule("right_angle", re.compile("》"), ">"),
    # One or two glyphs collapse to a single "..."
    SubstitutionRule("ellipsis", re.compile("…{1,2}"), "..."),
)


def build_checker(rules: Iterable[SubstitutionRule]) -> Pattern[str]:
    """Combine rule patterns into one alternation, keeping table order."""
    return re.compile("|".join(rule.pattern.pattern for rule in rules))


CHECKER_PATTERN: Pattern[str] = build_checker(PUNCTUATION_TABLE)


# ============================================================================
# Public API
# ============================================================================


def rules() -> tuple[SubstitutionRule, ...]:
    """Return the ordered substitution table."""
    return PUNCTUATION_TABLE


def rule_names() -> list[str]:
    return [rule.name for rule in PUNCTUATION_TABLE]


def rules_to_dicts(table: Iterable[SubstitutionRule] = PUNCTUATION_TABLE) -> list[dict]:
    """Serialize rules for JSON response."""
    return [
        {
            "name": rule.name,
            "pattern": rule.pattern.pattern,
            "replacement": rule.replacement,
        }
        for rule in table
    ]
