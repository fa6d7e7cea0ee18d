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

from collections.abc import Iterable

from gutterdiff.core.exceptions import invalid_hunk_header
from gutterdiff.core.hunks.models import Hunk, HunkKind, Node


def create_hunk(old_start: int, old_count: int, new_start: int, new_count: int) -> Hunk:
    """Build a hunk from an old/new start+count quadruple."""
    old_range = f"{old_start},{old_count}" if old_count > 0 else f"{old_start}"
    new_range = f"{new_start},{new_count}" if new_count > 0 else f"{new_start}"

    if new_count == 0:
        kind: HunkKind = "delete"
    elif old_count == 0:
        kind = "add"
    else:
        kind = "change"

    return Hunk(
        kind=kind,
        header=f"@@ -{old_range} +{new_range} @@",
        removed=Node(start=old_start, count=old_count),
        added=Node(start=new_start, count=new_count),
        vend=new_start + max(new_count - 1, 0),
    )


def _parse_range(field: str, line: str) -> tuple[int, int]:
    # field looks like "-12,3" or "+12" (count defaults to 1)
    start, _, count = field[1:].partition(",")
    try:
        return int(start), (int(count) if count else 1)
    except ValueError as e:
        raise invalid_hunk_header(line, f"non-numeric range {field!r}") from e


def parse_diff_line(line: str) -> Hunk:
    """
    Parse a unified diff hunk header such as "@@ -1,3 +1,5 @@ def foo():".

    The header of the returned hunk is the input line verbatim, so any
    trailing context after the second "@@" is preserved.

    Raises:
        HunkParseError: if the line is not a well formed hunk header
    """
    parts = line.split("@@")
    if len(parts) < 3:
        raise invalid_hunk_header(line, "missing closing '@@'")

    fields = parts[1].split()
    if len(fields) < 2:
        raise invalid_hunk_header(line, "expected an old and a new range")

    old_start, old_count = _parse_range(fields[0], line)
    new_start, new_count = _parse_range(fields[1], line)

    hunk = create_hunk(old_start, old_count, new_start, new_count)
    hunk.header = line
    return hunk


def parse_diff(lines: Iterable[str]) -> list[Hunk]:
    """
    Parse the body of a single-file unified diff into populated hunks.

    Anything before the first hunk header (diff --git, index, ---/+++ lines)
    is skipped. Context lines are ignored, so this is meant for -U0 output.
    """
    hunks: list[Hunk] = []
    last_side: Node | None = None

    for line in lines:
        line = line.rstrip("\n")
        if line.startswith("@@"):
            # a CRLF diff may end the header with \r
            hunks.append(parse_diff_line(line.rstrip("\r")))
            last_side = None
        elif not hunks:
            continue
        elif line.startswith("-"):
            last_side = hunks[-1].removed
            last_side.lines.append(line[1:])
        elif line.startswith("+"):
            last_side = hunks[-1].added
            last_side.lines.append(line[1:])
        elif line.startswith("\\"):
            # "\ No newline at end of file" applies to the preceding line's side
            if last_side is not None:
                last_side.no_newline_at_eof = True

    return hunks
