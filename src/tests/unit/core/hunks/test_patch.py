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

from gutterdiff.core.hunks.factory import create_hunk
from gutterdiff.core.hunks.patch import create_patch, patch_lines

HEADER = [
    "diff --git a/a.txt b/a.txt",
    "index 000000..000000 100644",
    "--- a/a.txt",
    "+++ b/a.txt",
]


def _hunk(old_start, old_count, new_start, new_count, removed=(), added=()):
    hunk = create_hunk(old_start, old_count, new_start, new_count)
    hunk.removed.lines = list(removed)
    hunk.added.lines = list(added)
    return hunk


def test_single_change_hunk():
    hunk = _hunk(3, 1, 3, 2, removed=["old"], added=["new1", "new2"])

    result = create_patch("a.txt", [hunk], "100644")

    assert result.lines == HEADER + [
        "@@ -3,1 +3,2 @@",
        "-old",
        "+new1",
        "+new2",
    ]
    assert result.hunks[0].removed.start == 3
    assert result.hunks[0] is not hunk


def test_offset_accumulates_over_hunks():
    first = _hunk(2, 0, 3, 2, added=["a", "b"])
    second = _hunk(10, 2, 12, 1, removed=["x", "y"], added=["z"])

    result = create_patch("a.txt", [first, second], "100644")

    assert result.lines == HEADER + [
        "@@ -3,0 +3,2 @@",
        "+a",
        "+b",
        "@@ -10,2 +12,1 @@",
        "-x",
        "-y",
        "+z",
    ]
    assert [h.removed.start for h in result.hunks] == [3, 12]
    # inputs keep their original anchors
    assert first.removed.start == 2
    assert second.removed.start == 10


def test_delete_hunk():
    hunk = _hunk(4, 2, 3, 0, removed=["p", "q"])

    result = create_patch("a.txt", [hunk], "100755")

    assert result.lines[1] == "index 000000..000000 100755"
    assert result.lines[4:] == ["@@ -4,2 +4,0 @@", "-p", "-q"]


def test_invert_swaps_sides():
    hunk = _hunk(5, 1, 5, 2, removed=["old"], added=["n1", "n2"])

    result = create_patch("a.txt", [hunk], "100644", invert=True)

    assert result.lines[4:] == ["@@ -5,2 +5,1 @@", "-n1", "-n2", "+old"]


def test_no_newline_markers():
    hunk = _hunk(1, 1, 1, 1, removed=["a"], added=["b"])
    hunk.added.no_newline_at_eof = True

    result = create_patch("a.txt", [hunk], "100644")

    assert result.lines[4:] == [
        "@@ -1,1 +1,1 @@",
        "-a",
        "+b",
        "\\ No newline at end of file",
    ]

    hunk.removed.no_newline_at_eof = True
    result = create_patch("a.txt", [hunk], "100644")

    assert result.lines[4:] == [
        "@@ -1,1 +1,1 @@",
        "-a",
        "\\ No newline at end of file",
        "+b",
        "\\ No newline at end of file",
    ]


def test_empty_hunk_list():
    result = create_patch("a.txt", [], "100644")

    assert result.lines == HEADER
    assert result.hunks == []


def test_patch_lines():
    hunk = _hunk(1, 1, 1, 1, removed=["a\r"], added=["b\r"])

    assert patch_lines(hunk, "unix") == ["-a\r", "+b\r"]
    assert patch_lines(hunk, "dos") == ["-a", "+b"]
