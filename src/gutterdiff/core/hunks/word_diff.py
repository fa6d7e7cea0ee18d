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

"""
Character level diff of the line pairs of a change hunk.

Lines are paired by position, so regions are only produced when both sides
have the same number of lines. Column numbers are 1-based character offsets
into the line content, which is also the 0-based column in a preview line
carrying a one character "-"/"+" prefix.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from difflib import SequenceMatcher

from gutterdiff.core.hunks.models import HunkKind, WordDiffRegion

# character hunks closer together than this are merged into one region
GAP_BETWEEN_REGIONS = 5

WordDiffEngine = Callable[
    [Sequence[str], Sequence[str]],
    tuple[list[WordDiffRegion], list[WordDiffRegion]],
]


@dataclass
class _CharHunk:
    kind: HunkKind
    removed_start: int
    removed_count: int
    added_start: int
    added_count: int


def _char_hunks(old: str, new: str) -> list[_CharHunk]:
    matcher = SequenceMatcher(None, old, new, autojunk=False)

    hunks = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        kind: HunkKind = {"insert": "add", "delete": "delete"}.get(tag, "change")
        hunks.append(_CharHunk(kind, i1 + 1, i2 - i1, j1 + 1, j2 - j1))
    return hunks


def _denoise(hunks: list[_CharHunk]) -> list[_CharHunk]:
    if not hunks:
        return []

    ret = [hunks[0]]
    for n in hunks[1:]:
        h = ret[-1]
        if n.added_start - h.added_start - h.added_count < GAP_BETWEEN_REGIONS:
            h.added_count = n.added_start + n.added_count - h.added_start
            h.removed_count = n.removed_start + n.removed_count - h.removed_start
            if h.added_count > 0 or h.removed_count > 0:
                h.kind = "change"
        else:
            ret.append(n)
    return ret


def run_word_diff(
    removed: Sequence[str], added: Sequence[str]
) -> tuple[list[WordDiffRegion], list[WordDiffRegion]]:
    """
    Compute intraline highlight regions for paired removed/added lines.

    Returns:
        (removed_regions, added_regions), each region holding the 0-based
        index of its line within its own side.
    """
    removed_regions: list[WordDiffRegion] = []
    added_regions: list[WordDiffRegion] = []

    if len(removed) != len(added):
        return removed_regions, added_regions

    for i, (old, new) in enumerate(zip(removed, added)):
        for h in _denoise(_char_hunks(old, new)):
            removed_regions.append(
                WordDiffRegion(
                    i, h.kind, h.removed_start, h.removed_start + h.removed_count
                )
            )
            added_regions.append(
                WordDiffRegion(i, h.kind, h.added_start, h.added_start + h.added_count)
            )

    return removed_regions, added_regions
