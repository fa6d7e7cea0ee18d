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

from gutterdiff.commands.utils import console, load_hunks
from gutterdiff.core.exceptions import handle_gutterdiff_exception
from gutterdiff.core.hunks import get_summary


def main(
    diff_file: str = typer.Argument(..., help="Unified diff file, or - for stdin."),
) -> None:
    """
    Print the added/changed/removed line totals of a diff.

    Examples:
        git diff -U0 file.py | gutterdiff summary -
    """
    with handle_gutterdiff_exception():
        summary = get_summary(load_hunks(diff_file))

    console.print(
        summary.format() or "no changes",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
