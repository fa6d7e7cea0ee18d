# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

from gutterdiff.core.hunks.factory import create_hunk, parse_diff_line
from gutterdiff.core.hunks.filter import compare_heads, filter_common


def _with_lines(header, *lines):
    hunk = parse_diff_line(header)
    hunk.added.lines = list(lines)
    return hunk


# -----------------------------------------------------------------------------
# compare_heads
# -----------------------------------------------------------------------------


def test_compare_heads_both_missing():
    assert compare_heads(None, None) is False


def test_compare_heads_one_missing():
    assert compare_heads(None, []) is True
    assert compare_heads([], None) is True


def test_compare_heads_same_headers():
    a = [create_hunk(1, 1, 1, 1), create_hunk(5, 0, 6, 2)]
    b = [h.copy() for h in a]
    # line content is not part of the comparison
    b[0].added.lines = ["different"]

    assert compare_heads(a, b) is False


def test_compare_heads_different_length():
    a = [create_hunk(1, 1, 1, 1)]

    assert compare_heads(a, a + [create_hunk(5, 0, 6, 2)]) is True


def test_compare_heads_different_header():
    assert compare_heads([create_hunk(1, 1, 1, 1)], [create_hunk(1, 1, 1, 2)]) is True


# -----------------------------------------------------------------------------
# filter_common
# -----------------------------------------------------------------------------


def test_filter_common_drops_hunk_with_same_new_side():
    a = [
        _with_lines("@@ -24 +25,1 @@", "foo"),
        _with_lines("@@ -32 +34,1 @@", "bar"),
        _with_lines("@@ -37 +40,1 @@", "baz"),
    ]
    b = [_with_lines("@@ -26 +25,1 @@", "foo")]

    result = filter_common(a, b)

    assert len(result) == 2
    assert result[0] is a[1]
    assert result[1] is a[2]


def test_filter_common_keeps_hunk_with_other_content():
    a = [_with_lines("@@ -24 +25,1 @@", "foo")]
    b = [_with_lines("@@ -24 +25,1 @@", "FOO")]

    assert filter_common(a, b) == a


def test_filter_common_keeps_hunk_with_other_count():
    a = [_with_lines("@@ -24 +25,2 @@", "foo", "bar")]
    b = [_with_lines("@@ -24 +25,1 @@", "foo")]

    assert filter_common(a, b) == a


def test_filter_common_missing_inputs():
    a = [_with_lines("@@ -1 +1,1 @@", "x")]

    assert filter_common(None, None) is None
    assert filter_common(None, a) == []
    assert filter_common(a, None) == a
    assert filter_common(a, []) == a


def test_filter_common_interleaved():
    a = [
        _with_lines("@@ -2 +2,1 @@", "two"),
        _with_lines("@@ -9 +9,1 @@", "nine"),
        _with_lines("@@ -20 +20,1 @@", "twenty"),
    ]
    b = [
        _with_lines("@@ -5 +5,1 @@", "five"),
        _with_lines("@@ -9 +9,1 @@", "nine"),
    ]

    result = filter_common(a, b)

    assert result == [a[0], a[2]]
