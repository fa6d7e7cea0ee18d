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
from rich.table import Table

from gutterdiff.commands.utils import console, load_hunks
from gutterdiff.context import GutterContext
from gutterdiff.core.exceptions import handle_gutterdiff_exception
from gutterdiff.core.hunks import calc_all_signs


def main(
    ctx: typer.Context,
    diff_file: str = typer.Argument(..., help="Unified diff file, or - for stdin."),
    min_lnum: int | None = typer.Option(
        None, "--min", help="First visible line of the window."
    ),
    max_lnum: int | None = typer.Option(
        None, "--max", help="Last visible line of the window (default: unbounded)."
    ),
    untracked: bool = typer.Option(
        False, "--untracked", help="Treat the file as untracked."
    ),
) -> None:
    """
    List the gutter signs a diff produces.

    Examples:
        gutterdiff --sign-algorithm refined signs changes.diff --min 1 --max 60
    """
    global_context: GutterContext = ctx.obj

    with handle_gutterdiff_exception():
        hunks = load_hunks(diff_file)

    signs = calc_all_signs(
        hunks,
        min_lnum=min_lnum,
        max_lnum=max_lnum,
        untracked=untracked,
        calculator=global_context.sign_calculator,
    )

    table = Table(title=f"signs ({global_context.sign_calculator.name})")
    table.add_column("Line", justify="right")
    table.add_column("Kind")
    table.add_column("Count", justify="right")

    for sign in signs:
        table.add_row(
            str(sign.line_number),
            sign.kind,
            "" if sign.count is None else str(sign.count),
        )

    console.print(table)
