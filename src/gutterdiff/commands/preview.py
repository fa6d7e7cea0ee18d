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

import typer
from loguru import logger
from rich.text import Text

from gutterdiff.commands.utils import console, load_hunks
from gutterdiff.constants import (
    HL_ADD_INLINE,
    HL_ADD_PREVIEW,
    HL_DELETE_INLINE,
    HL_DELETE_PREVIEW,
)
from gutterdiff.context import GutterContext
from gutterdiff.core.exceptions import handle_gutterdiff_exception
from gutterdiff.core.hunks import LineSpec, build_highlighted_lines, find_hunk

STYLES = {
    HL_DELETE_PREVIEW: "red",
    HL_ADD_PREVIEW: "green",
    HL_DELETE_INLINE: "bold reverse red",
    HL_ADD_INLINE: "bold reverse green",
}


def render_line(spec: LineSpec) -> Text:
    text = Text(spec.text)
    for mark in spec.marks:
        style = STYLES.get(mark.hl_group, "")
        if mark.start_col is None:
            text.stylize(style)
        else:
            text.stylize(style, mark.start_col, mark.end_col)
    return text


def main(
    ctx: typer.Context,
    diff_file: str = typer.Argument(..., help="Unified diff file, or - for stdin."),
    line: int = typer.Argument(..., help="A new-file line inside the hunk."),
) -> None:
    """
    Preview the hunk covering LINE with intraline highlights.
    """
    global_context: GutterContext = ctx.obj

    with handle_gutterdiff_exception():
        hunks = load_hunks(diff_file)

    found = find_hunk(line, hunks)
    if found is None:
        logger.info(f"No hunk at line {line}")
        raise typer.Exit(1)

    hunk, _ = found
    console.print(hunk.header, markup=False, highlight=False, soft_wrap=True)
    for spec in build_highlighted_lines(
        hunk, global_context.config.file_format, global_context.word_diff
    ):
        console.print(render_line(spec), highlight=False, soft_wrap=True)
