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

from gutterdiff.commands.utils import console, load_hunks
from gutterdiff.context import GutterContext
from gutterdiff.core.exceptions import ValidationError, handle_gutterdiff_exception
from gutterdiff.core.hunks import find_nearest_hunk

DIRECTIONS = ("first", "last", "next", "prev")


def main(
    ctx: typer.Context,
    diff_file: str = typer.Argument(..., help="Unified diff file, or - for stdin."),
    line: int = typer.Argument(..., help="Current line in the new file."),
    direction: str = typer.Option(
        "next", "--direction", "-d", help="One of first, last, next, prev."
    ),
) -> None:
    """
    Show the hunk a navigation jump from LINE would land on.
    """
    global_context: GutterContext = ctx.obj

    with handle_gutterdiff_exception():
        if direction not in DIRECTIONS:
            raise ValidationError(
                f"Invalid direction: {direction}",
                f"Expected one of {', '.join(DIRECTIONS)}",
            )
        hunks = load_hunks(diff_file)

    index = find_nearest_hunk(line, hunks, direction, wrap=global_context.config.wrap)
    if index is None:
        logger.info(f"No hunk {direction} of line {line}")
        raise typer.Exit(1)

    hunk = hunks[index]
    console.print(
        f"{index + 1}/{len(hunks)} line {max(hunk.added.start, 1)}: {hunk.header}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
