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

from gutterdiff.commands.utils import load_hunks, read_lines
from gutterdiff.constants import DEFAULT_FILE_MODE
from gutterdiff.core.exceptions import handle_gutterdiff_exception, invalid_line_range
from gutterdiff.core.hunks import create_partial_hunk, create_patch, fill_partial_hunk
from gutterdiff.core.logging.logging import time_block


def main(
    diff_file: str = typer.Argument(..., help="Unified diff file, or - for stdin."),
    top: int = typer.Argument(..., help="First new-file line of the range."),
    bot: int = typer.Argument(..., help="Last new-file line of the range."),
    old: str = typer.Option(..., "--old", help="The old (index) version of the file."),
    new: str = typer.Option(..., "--new", help="The new (working tree) version of the file."),
    path: str = typer.Option("file", "--path", help="Path written into the patch headers."),
    mode: str = typer.Option(DEFAULT_FILE_MODE, "--mode", help="File mode for the index line."),
    invert: bool = typer.Option(
        False, "--invert", help="Build a reverse patch (reset the range instead of staging it)."
    ),
) -> None:
    """
    Print a patch containing only the changes between lines TOP and BOT.

    Examples:
        gutterdiff stage changes.diff 10 14 --old a.py.orig --new a.py --path a.py | git apply --cached
    """
    with handle_gutterdiff_exception():
        if top < 1 or top > bot:
            raise invalid_line_range(top, bot)

        hunks = load_hunks(diff_file)
        old_lines = read_lines(old)
        new_lines = read_lines(new)

    with time_block("partial hunk"):
        partial = create_partial_hunk(hunks, top, bot)

    if partial is None:
        logger.info(f"No changes between lines {top} and {bot}")
        raise typer.Exit(1)

    hunk = fill_partial_hunk(partial, old_lines, new_lines)
    logger.debug(f"Partial hunk {hunk.header}")

    # verbatim, so lines keep \r and other control characters
    typer.echo("\n".join(create_patch(path, [hunk], mode, invert=invert).lines))
