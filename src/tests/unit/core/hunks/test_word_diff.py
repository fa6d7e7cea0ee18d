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

from gutterdiff.core.hunks.models import WordDiffRegion
from gutterdiff.core.hunks.word_diff import run_word_diff


def test_unpaired_lines_give_no_regions():
    assert run_word_diff(["a", "b"], ["a"]) == ([], [])
    assert run_word_diff([], ["a"]) == ([], [])


def test_identical_lines_give_no_regions():
    assert run_word_diff(["same"], ["same"]) == ([], [])


def test_single_character_change():
    removed, added = run_word_diff(["foo bar"], ["foo baz"])

    assert removed == [WordDiffRegion(0, "change", 7, 8)]
    assert added == [WordDiffRegion(0, "change", 7, 8)]


def test_insertion():
    removed, added = run_word_diff(["abc"], ["abXc"])

    assert removed == [WordDiffRegion(0, "add", 3, 3)]
    assert added == [WordDiffRegion(0, "add", 3, 4)]


def test_close_regions_are_merged():
    removed, added = run_word_diff(["a1b2c"], ["aXbYc"])

    assert removed == [WordDiffRegion(0, "change", 2, 5)]
    assert added == [WordDiffRegion(0, "change", 2, 5)]


def test_distant_regions_stay_apart():
    removed, added = run_word_diff(["a1bcdefgh2"], ["aXbcdefghY"])

    assert added == [
        WordDiffRegion(0, "change", 2, 3),
        WordDiffRegion(0, "change", 10, 11),
    ]
    assert removed == added


def test_regions_carry_their_line_index():
    removed, added = run_word_diff(["keep", "old"], ["keep", "olD"])

    assert removed == [WordDiffRegion(1, "change", 3, 4)]
    assert added == [WordDiffRegion(1, "change", 3, 4)]
