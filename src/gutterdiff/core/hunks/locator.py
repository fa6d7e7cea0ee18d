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

from collections.abc import Sequence
from typing import Literal

from gutterdiff.core.hunks.models import Hunk

Direction = Literal["first", "last", "next", "prev"]


def find_hunk(line_number: int, hunks: Sequence[Hunk] | None) -> tuple[Hunk, int] | None:
    """Return the first hunk covering a new-file line, with its list index."""
    for i, hunk in enumerate(hunks or []):
        # a hunk on an emptied file sits at line 0 but belongs to line 1
        if line_number == 1 and hunk.added.start == 0 and hunk.vend == 0:
            return hunk, i

        if hunk.added.start <= line_number <= hunk.vend:
            return hunk, i

    return None


def find_nearest_hunk(
    line_number: int,
    hunks: Sequence[Hunk],
    direction: Direction,
    wrap: bool = False,
) -> int | None:
    """
    Find the index of the hunk to jump to from ``line_number``.

    Args:
        line_number: current new-file line
        hunks: ascending hunk list
        direction: "first", "last", "next" or "prev"
        wrap: continue from the other end of the list when nothing lies in
            the requested direction

    Returns:
        A 0-based index into ``hunks``, or None if there is nowhere to go.
    """
    if not hunks:
        return None

    last = len(hunks) - 1

    if direction == "first":
        return 0
    if direction == "last":
        return last

    if direction == "next":
        if hunks[0].added.start > line_number:
            return 0
        for i in range(last, -1, -1):
            if hunks[i].added.start <= line_number:
                if i < last and hunks[i + 1].added.start > line_number:
                    return i + 1
                if wrap:
                    return 0
        return None

    if direction == "prev":
        if hunks[last].vend < line_number:
            return last
        for i in range(len(hunks)):
            if line_number <= max(hunks[i].vend, 1):
                if i > 0 and max(hunks[i - 1].vend, 1) < line_number:
                    return i - 1
                if wrap:
                    return last
        return None

    return None
