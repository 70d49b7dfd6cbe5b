# SPDX-License-Identifier: Apache-2.0
"""Unit tests for the scanner pure module."""

import pytest

from punct_lint.punctuation_table import CHECKER_PATTERN
from punct_lint.scanner import (
    MatchCoordinate,
    apply_fixes,
    coordinates_to_dicts,
    count_by_rule,
    has_violations,
    locate_matches,
)

SAMPLES = [
    "",
    "plain ascii, nothing to see.",
    "你好，世界。",
    "a，中。\nb，",
    "【注意】：请使用《手册》（第2版）？",
    "他说：“好的”；她说：‘不’、‘不’……",
    "first line\n\n……\n………\n",
    "windows\r\n行尾，\r\n",
]


# ============================================================================
# has_violations
# ============================================================================


def test_empty_text_is_clean():
    assert has_violations("") is False
    assert locate_matches("") == []


def test_ascii_text_is_clean():
    content = "Hello, world. (a) [b] <c> 'd' \"e\"... ok?"
    assert has_violations(content) is False
    assert apply_fixes(content) == content


def test_cjk_text_without_punctuation_is_clean():
    content = "中文文本没有标点"
    assert has_violations(content) is False
    assert apply_fixes(content) == content


def test_has_violations_detects_single_char():
    assert has_violations("abc。") is True


# ============================================================================
# apply_fixes
# ============================================================================


def test_fix_comma_and_full_stop():
    assert apply_fixes("你好，世界。") == "你好,世界."


def test_fix_curly_single_quotes_and_ellipsis():
    assert apply_fixes("He said ‘hi’…") == "He said 'hi'..."


def test_fix_curly_double_quotes():
    assert apply_fixes("“quoted”") == '"quoted"'


def test_fix_enumeration_comma():
    assert apply_fixes("甲、乙、丙") == "甲,乙,丙"


def test_fix_brackets_and_marks():
    content = "【注意】：请使用《手册》（第2版）？"
    assert apply_fixes(content) == "[注意]:请使用<手册>(第2版)?"


def test_fix_semicolon():
    assert apply_fixes("一；二") == "一;二"


def test_fix_preserves_line_endings():
    assert apply_fixes("a，\r\nb。\n") == "a,\r\nb.\n"


@pytest.mark.parametrize("content", SAMPLES)
def test_fix_is_idempotent(content):
    once = apply_fixes(content)
    assert apply_fixes(once) == once
    assert has_violations(once) is False


# ============================================================================
# ellipsis characterization
# ============================================================================


def test_ellipsis_single_glyph():
    assert apply_fixes("wait…") == "wait..."


def test_ellipsis_two_glyphs_collapse_to_one_replacement():
    assert apply_fixes("wait……") == "wait..."
    assert len(locate_matches("wait……")) == 1


def test_ellipsis_three_glyphs_split_two_then_one():
    assert apply_fixes("………") == "......"
    assert [c.column for c in locate_matches("………")] == [1, 3]


def test_ellipsis_literal_brace_text_is_not_special():
    assert apply_fixes("…{1, 2}") == "...{1, 2}"


# ============================================================================
# locate_matches
# ============================================================================


def test_coordinates_across_lines():
    assert locate_matches("a，中。\nb，") == [
        MatchCoordinate(line=1, column=2, char="，"),
        MatchCoordinate(line=1, column=4, char="。"),
        MatchCoordinate(line=2, column=2, char="，"),
    ]


def test_match_at_first_character():
    assert locate_matches("，x") == [MatchCoordinate(line=1, column=1, char="，")]


def test_match_right_after_newline():
    assert locate_matches("x\n（y") == [MatchCoordinate(line=2, column=1, char="（")]


def test_multiple_matches_on_one_line_left_to_right():
    coords = locate_matches("（a）【b】")
    assert [(c.column, c.char) for c in coords] == [(1, "（"), (3, "）"), (4, "【"), (6, "】")]
    assert {c.line for c in coords} == {1}


def test_columns_count_characters_not_bytes():
    assert locate_matches("中文中文，")[0].column == 5


def test_blank_lines_are_counted():
    coords = locate_matches("first line\n\n……\n")
    assert coords == [MatchCoordinate(line=3, column=1, char="…")]


def test_locate_does_not_modify_or_dedupe():
    content = "，，，"
    assert len(locate_matches(content)) == 3
    assert content == "，，，"


@pytest.mark.parametrize("content", SAMPLES)
def test_match_count_equals_sum_of_per_rule_counts(content):
    assert len(locate_matches(content)) == sum(count_by_rule(content).values())


def test_count_by_rule():
    counts = count_by_rule("“一”，二、三。")
    assert counts["double_quote"] == 2
    assert counts["comma"] == 2
    assert counts["full_stop"] == 1
    assert counts["ellipsis"] == 0


def test_coordinates_to_dicts():
    assert coordinates_to_dicts(locate_matches("x？")) == [
        {"line": 1, "column": 2, "char": "？"}
    ]


def test_coordinates_on_long_document_match_line_split():
    lines = [
        "plain line",
        "",
        "（开头）和结尾。",
        "中间，有，三个，",
        "\r",
        "……",
    ] * 200
    content = "\n".join(lines)
    expected = []
    for line_no, text in enumerate(lines, start=1):
        for m in CHECKER_PATTERN.finditer(text):
            expected.append(MatchCoordinate(line=line_no, column=m.start() + 1, char=text[m.start()]))
    assert locate_matches(content) == expected
