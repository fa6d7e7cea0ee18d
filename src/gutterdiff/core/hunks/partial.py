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

from gutterdiff.core.hunks.factory import create_hunk
from gutterdiff.core.hunks.models import Hunk


def create_partial_hunk(hunks: Sequence[Hunk], top: int, bot: int) -> Hunk | None:
    """
    Build the single hunk representing only the edits inside new-file lines
    [top, bot].

    Used to stage or reset part of a hunk. The old-side anchor drifts by the
    net delta of every hunk that lies wholly above the range, and by the part
    of an intersecting hunk that was added above ``top``.

    Args:
        hunks: ascending, non-overlapping hunks in new-file coordinates
        top: first new-file line of the range
        bot: last new-file line of the range (top <= bot)

    Returns:
        The partial hunk, or None if the range touches no hunk at all.
    """
    pre_top = top
    pre_count = bot - top + 1
    unused = 0

    for h in hunks:
        added_in_hunk = h.added.count - h.removed.count
        added_in_range = 0

        if h.added.start >= top and h.vend <= bot:
            # range contains hunk
            added_in_range = added_in_hunk
        else:
            # lines of the hunk's new side past its old-side extent
            old_end = h.added.start + h.removed.count
            added_above_bot = max(0, bot + 1 - old_end)
            added_above_top = max(0, top - old_end)

            if top <= h.added.start <= bot:
                # range top intersects hunk
                added_in_range = added_above_bot
            elif top <= h.vend <= bot:
                # range bottom intersects hunk
                added_in_range = added_in_hunk - added_above_top
                pre_top -= added_above_top
            elif h.added.start <= top and h.vend >= bot:
                # range within hunk
                added_in_range = added_above_bot - added_above_top
                pre_top -= added_above_top
            else:
                unused += 1

            if top > h.vend:
                pre_top -= added_in_hunk

        pre_count -= added_in_range

    if unused == len(hunks):
        return None

    if pre_count == 0:
        # a zero-length old side anchors on the line before
        pre_top -= 1

    return create_hunk(pre_top, pre_count, top, bot - top + 1)


def fill_partial_hunk(
    hunk: Hunk, old_lines: Sequence[str], new_lines: Sequence[str]
) -> Hunk:
    """
    Return a copy of a partial hunk with its line content taken from the old
    and new file texts, ready to be serialized into a patch.
    """
    filled = hunk.copy()

    top = filled.added.start
    filled.added.lines = list(new_lines[top - 1 : top - 1 + filled.added.count])

    if filled.removed.count > 0:
        old_top = filled.removed.start
        filled.removed.lines = list(
            old_lines[old_top - 1 : old_top - 1 + filled.removed.count]
        )
    else:
        filled.removed.lines = []

    return filled
