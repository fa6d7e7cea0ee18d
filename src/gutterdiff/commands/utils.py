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

import sys
from pathlib import Path

from loguru import logger
from rich.console import Console

from gutterdiff.core.exceptions import ValidationError
from gutterdiff.core.hunks import Hunk, parse_diff

# command results go to stdout, logs go to stderr
console = Console()


def split_lines(text: str) -> list[str]:
    """Split on "\\n" only, keeping "\\r" and any other control characters in the line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines(path: str) -> list[str]:
    """Read a UTF-8 text file (or stdin for "-") into lines without their "\\n" terminators."""
    if path == "-":
        data = sys.stdin.buffer.read()
    else:
        file_path = Path(path)
        if not file_path.is_file():
            raise ValidationError(
                f"Path not found: {path}",
                "Please check that the path exists and is accessible",
            )
        data = file_path.read_bytes()

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValidationError(f"Cannot decode {path} as UTF-8", str(e)) from e

    return split_lines(text)


def load_hunks(diff_path: str) -> list[Hunk]:
    hunks = parse_diff(read_lines(diff_path))
    logger.debug(f"Parsed {len(hunks)} hunks from {diff_path}")
    return hunks
