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

from gutterdiff.core.hunks.factory import create_hunk, parse_diff, parse_diff_line
from gutterdiff.core.hunks.filter import compare_heads, filter_common
from gutterdiff.core.hunks.highlight import build_highlighted_lines
from gutterdiff.core.hunks.locator import find_hunk, find_nearest_hunk
from gutterdiff.core.hunks.models import (
    HighlightMark,
    Hunk,
    LineSpec,
    Node,
    PatchResult,
    Sign,
    Summary,
    WordDiffRegion,
)
from gutterdiff.core.hunks.partial import create_partial_hunk, fill_partial_hunk
from gutterdiff.core.hunks.patch import create_patch, patch_lines
from gutterdiff.core.hunks.signs import (
    BaselineSignCalculator,
    RefinedSignCalculator,
    SignCalculator,
    calc_all_signs,
    calc_signs,
    get_sign_calculator,
)
from gutterdiff.core.hunks.summary import get_summary
from gutterdiff.core.hunks.word_diff import run_word_diff

__all__ = [
    "BaselineSignCalculator",
    "HighlightMark",
    "Hunk",
    "LineSpec",
    "Node",
    "PatchResult",
    "RefinedSignCalculator",
    "Sign",
    "SignCalculator",
    "Summary",
    "WordDiffRegion",
    "build_highlighted_lines",
    "calc_all_signs",
    "calc_signs",
    "compare_heads",
    "create_hunk",
    "create_partial_hunk",
    "create_patch",
    "fill_partial_hunk",
    "filter_common",
    "find_hunk",
    "find_nearest_hunk",
    "get_sign_calculator",
    "get_summary",
    "parse_diff",
    "parse_diff_line",
    "patch_lines",
    "run_word_diff",
]
