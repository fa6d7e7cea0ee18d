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
from gutterdiff.core.hunks.models import HighlightMark, Hunk, LineSpec
from gutterdiff.core.hunks.utils import strip_cr
from gutterdiff.core.hunks.word_diff import WordDiffEngine, run_word_diff


def build_highlighted_lines(
    hunk: Hunk,
    file_format: str,
    word_diff: WordDiffEngine | None = run_word_diff,
) -> list[LineSpec]:
    """
    Build preview lines for a hunk: removed lines prefixed with "-", then
    added lines prefixed with "+", each highlighted as a whole.

    Args:
        hunk: the hunk to preview, with its line content populated
        file_format: "dos" strips carriage returns from the line content
        word_diff: intraline diff engine, or None to disable intraline
            highlights

    Returns:
        One LineSpec per removed and added line, in that order.
    """
    removed, added = hunk.removed.lines, hunk.added.lines

    if file_format == "dos":
        removed = strip_cr(removed)
        added = strip_cr(added)

    specs = []
    for sym, lines, hl_group in (
        ("-", removed, HL_DELETE_PREVIEW),
        ("+", added, HL_ADD_PREVIEW),
    ):
        for line in lines:
            # end_row=1 highlights the whole line
            mark = HighlightMark(hl_group=hl_group, start_row=0, end_row=1)
            specs.append(LineSpec(text=sym + line, marks=[mark]))

    if word_diff is None:
        return specs

    removed_regions, added_regions = word_diff(removed, added)

    for region in removed_regions:
        specs[region.line_index].marks.append(
            HighlightMark(
                hl_group=HL_DELETE_INLINE,
                start_col=region.start_col,
                end_col=region.end_col,
            )
        )

    for region in added_regions:
        specs[hunk.removed.count + region.line_index].marks.append(
            HighlightMark(
                hl_group=HL_ADD_INLINE,
                start_col=region.start_col,
                end_col=region.end_col,
            )
        )

    return specs
