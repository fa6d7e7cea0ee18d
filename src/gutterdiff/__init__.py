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

"""Hunk arithmetic for change-annotation UIs: gutter signs, partial hunks, patches and summaries."""

from gutterdiff.core.hunks import (
    Hunk,
    Node,
    Sign,
    Summary,
    build_highlighted_lines,
    calc_signs,
    compare_heads,
    create_hunk,
    create_partial_hunk,
    create_patch,
    filter_common,
    find_hunk,
    find_nearest_hunk,
    get_summary,
    parse_diff_line,
)

__all__ = [
    "Hunk",
    "Node",
    "Sign",
    "Summary",
    "build_highlighted_lines",
    "calc_signs",
    "compare_heads",
    "create_hunk",
    "create_partial_hunk",
    "create_patch",
    "filter_common",
    "find_hunk",
    "find_nearest_hunk",
    "get_summary",
    "parse_diff_line",
]
