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

from gutterdiff.constants import (
    HL_ADD_INLINE,
    HL_ADD_PREVIEW,
    HL_DELETE_INLINE,
    HL_DELETE_PREVIEW,
)
from gutterdiff.core.hunks.factory import create_hunk
from gutterdiff.core.hunks.highlight import build_highlighted_lines
from gutterdiff.core.hunks.models import HighlightMark, WordDiffRegion


def _hunk(removed, added):
    hunk = create_hunk(1, len(removed), 1, len(added))
    hunk.removed.lines = list(removed)
    hunk.added.lines = list(added)
    return hunk


def test_whole_line_marks_without_word_diff():
    hunk = _hunk(["foo bar"], ["foo baz"])

    specs = build_highlighted_lines(hunk, "unix", word_diff=None)

    assert [s.text for s in specs] == ["-foo bar", "+foo baz"]
    assert specs[0].marks == [
        HighlightMark(hl_group=HL_DELETE_PREVIEW, start_row=0, end_row=1)
    ]
    assert specs[1].marks == [
        HighlightMark(hl_group=HL_ADD_PREVIEW, start_row=0, end_row=1)
    ]


def test_intraline_marks():
    hunk = _hunk(["foo bar"], ["foo baz"])

    specs = build_highlighted_lines(hunk, "unix")

    assert specs[0].marks[1] == HighlightMark(
        hl_group=HL_DELETE_INLINE, start_col=7, end_col=8
    )
    assert specs[1].marks[1] == HighlightMark(
        hl_group=HL_ADD_INLINE, start_col=7, end_col=8
    )
    # the column lands on the changed character of the prefixed text
    assert specs[0].text[7] == "r"
    assert specs[1].text[7] == "z"


def test_unpaired_lines_only_get_whole_line_marks():
    hunk = _hunk(["a"], ["b", "c"])

    specs = build_highlighted_lines(hunk, "unix")

    assert [s.text for s in specs] == ["-a", "+b", "+c"]
    assert all(len(s.marks) == 1 for s in specs)


def test_added_regions_are_offset_by_removed_lines():
    hunk = _hunk(["x", "y"], ["x2", "y2"])

    def engine(removed, added):
        return (
            [WordDiffRegion(1, "change", 1, 2)],
            [WordDiffRegion(0, "add", 2, 3)],
        )

    specs = build_highlighted_lines(hunk, "unix", word_diff=engine)

    assert len(specs[0].marks) == 1
    assert specs[1].marks[1].hl_group == HL_DELETE_INLINE
    assert specs[2].marks[1] == HighlightMark(
        hl_group=HL_ADD_INLINE, start_col=2, end_col=3
    )
    assert len(specs[3].marks) == 1


def test_dos_format_strips_carriage_returns():
    hunk = _hunk(["a\r"], ["b\r"])

    specs = build_highlighted_lines(hunk, "dos", word_diff=None)

    assert [s.text for s in specs] == ["-a", "+b"]


def test_dos_format_strips_each_side_on_its_own():
    hunk = _hunk(["a\r"], ["b", "c\r"])

    specs = build_highlighted_lines(hunk, "dos", word_diff=None)

    assert [s.text for s in specs] == ["-a", "+b", "+c\r"]


def test_empty_hunk_sides():
    hunk = create_hunk(3, 2, 2, 0)

    assert build_highlighted_lines(hunk, "unix") == []
