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

from dataclasses import dataclass, field
from typing import Literal, NamedTuple

HunkKind = Literal["add", "change", "delete"]

SignKind = Literal["add", "change", "delete", "changedelete", "topdelete", "untracked"]


@dataclass
class Node:
    """One side (old/removed or new/added) of a hunk."""

    # first affected line, 1-based. 0 means "before the first line"
    start: int
    count: int
    lines: list[str] = field(default_factory=list)
    # this side's last line has no trailing newline
    no_newline_at_eof: bool = False

    def copy(self) -> "Node":
        return Node(
            start=self.start,
            count=self.count,
            lines=list(self.lines),
            no_newline_at_eof=self.no_newline_at_eof,
        )


@dataclass
class Hunk:
    """
    A contiguous block of changed lines relating an old-file range to a
    new-file range.

    Attributes:
        kind: "add" when nothing was removed, "delete" when nothing was added,
            "change" otherwise
        header: unified diff header, either synthesized or taken verbatim from
            diff output
        removed: old-file side
        added: new-file side
        vend: last new-file line touched by this hunk
    """

    kind: HunkKind
    header: str
    removed: Node
    added: Node
    vend: int

    def copy(self) -> "Hunk":
        return Hunk(
            kind=self.kind,
            header=self.header,
            removed=self.removed.copy(),
            added=self.added.copy(),
            vend=self.vend,
        )


@dataclass(frozen=True)
class Sign:
    kind: SignKind
    # target line in the new file
    line_number: int
    # only present on the sign that carries the run's line count
    count: int | None = None


@dataclass(frozen=True)
class Summary:
    added: int = 0
    changed: int = 0
    removed: int = 0

    def format(self) -> str:
        """Render as a status string such as "+3 ~1 -2", skipping zero parts."""
        parts = []
        if self.added > 0:
            parts.append(f"+{self.added}")
        if self.changed > 0:
            parts.append(f"~{self.changed}")
        if self.removed > 0:
            parts.append(f"-{self.removed}")
        return " ".join(parts)


@dataclass(frozen=True)
class HighlightMark:
    hl_group: str
    start_row: int = 0
    end_row: int | None = None
    start_col: int | None = None
    end_col: int | None = None


@dataclass
class LineSpec:
    """A preview line and the highlight marks applied to it."""

    text: str
    marks: list[HighlightMark] = field(default_factory=list)


class WordDiffRegion(NamedTuple):
    # index of the line within its own side (removed or added), 0-based
    line_index: int
    kind: HunkKind
    start_col: int
    end_col: int


@dataclass(frozen=True)
class PatchResult:
    """Serialized patch text plus the hunks with their corrected old-side starts."""

    lines: list[str]
    hunks: list[Hunk]
