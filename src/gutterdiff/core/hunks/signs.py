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

"""
Gutter sign calculation.

A hunk (seen together with its neighbours) and a visible window of new-file
lines are mapped to one Sign per visible line of the hunk. Two algorithms
exist and are kept as separate strategies: the baseline one and a refined
one that resolves top-delete and change-delete markers by looking at the
previous hunk instead of the next one. Their change-delete rules differ.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from loguru import logger

from gutterdiff.core.exceptions import unknown_sign_algorithm
from gutterdiff.core.hunks.models import Hunk, Sign, SignKind


def change_end(hunk: Hunk) -> int:
    """Last new-file line that gets a change (or delete) sign rather than an add tail."""
    if hunk.added.count == 0:
        # delete
        return hunk.added.start
    if hunk.removed.count == 0:
        # add
        return hunk.added.start + hunk.added.count - 1
    return hunk.added.start + min(hunk.added.count, hunk.removed.count) - 1


def _lines(first: int, last: int, max_lnum: int | None) -> range:
    if max_lnum is not None:
        last = min(last, max_lnum)
    return range(first, last + 1)


def _first_count(hunk: Hunk, lnum: int) -> int | None:
    if lnum != hunk.added.start:
        return None
    return hunk.added.count if hunk.kind == "add" else hunk.removed.count


def _tail_add_signs(
    hunk: Hunk, cend: int, min_lnum: int, max_lnum: int | None
) -> list[Sign]:
    # a change hunk that grew gets add signs for the lines past the changed part
    added, removed = hunk.added.count, hunk.removed.count
    if hunk.kind != "change" or added <= removed:
        return []
    if hunk.vend < min_lnum or (max_lnum is not None and cend > max_lnum):
        return []

    return [
        Sign(
            kind="add",
            line_number=lnum,
            count=added - removed if lnum == hunk.vend else None,
        )
        for lnum in _lines(max(cend, min_lnum), hunk.vend, max_lnum)
    ]


class SignCalculator(ABC):
    """Maps a hunk and a line window to gutter signs."""

    name: str

    def calc_signs(
        self,
        prev_hunk: Hunk | None,
        hunk: Hunk,
        next_hunk: Hunk | None,
        min_lnum: int | None = None,
        max_lnum: int | None = None,
        untracked: bool = False,
    ) -> list[Sign]:
        """
        Calculate the signs of ``hunk`` for new-file lines in [min_lnum, max_lnum].

        Args:
            prev_hunk: the hunk before this one in the list, if any
            hunk: the hunk to place signs for
            next_hunk: the hunk after this one in the list, if any
            min_lnum: first visible line, clamped to at least 1
            max_lnum: last visible line, None for no upper bound
            untracked: mark the lines as belonging to an untracked file;
                only valid for add hunks

        Returns:
            The signs, or an empty list if ``untracked`` is set on a hunk
            that is not an add hunk.
        """
        if untracked and hunk.kind != "add":
            logger.error(
                "Invalid hunk with untracked={untracked} hunk={header!r}",
                untracked=untracked,
                header=hunk.header,
            )
            return []

        min_lnum = max(1, min_lnum or 1)
        return self._calc(prev_hunk, hunk, next_hunk, min_lnum, max_lnum, untracked)

    @abstractmethod
    def _calc(
        self,
        prev_hunk: Hunk | None,
        hunk: Hunk,
        next_hunk: Hunk | None,
        min_lnum: int,
        max_lnum: int | None,
        untracked: bool,
    ) -> list[Sign]:
        """Strategy specific calculation with the window already clamped."""


class BaselineSignCalculator(SignCalculator):
    name = "baseline"

    def _calc(self, prev_hunk, hunk, next_hunk, min_lnum, max_lnum, untracked):
        start = hunk.added.start
        added, removed = hunk.added.count, hunk.removed.count

        if hunk.kind == "delete" and start == 0:
            # topdelete signs get placed one row lower
            if min_lnum <= 1:
                return [Sign(kind="topdelete", line_number=1, count=removed)]
            return []

        cend = change_end(hunk)

        # a change hunk is changedelete if it removed lines, or if the next
        # hunk deletes right at this hunk's last line
        changedelete = hunk.kind == "change" and (
            removed > added
            or (
                next_hunk is not None
                and next_hunk.kind == "delete"
                and start + added - 1 == next_hunk.added.start
            )
        )

        signs = []
        for lnum in _lines(max(start, min_lnum), cend, max_lnum):
            kind: SignKind
            if changedelete and lnum == cend:
                kind = "changedelete"
            elif untracked:
                kind = "untracked"
            else:
                kind = hunk.kind
            signs.append(
                Sign(kind=kind, line_number=lnum, count=_first_count(hunk, lnum))
            )

        signs.extend(_tail_add_signs(hunk, cend, min_lnum, max_lnum))
        return signs


class RefinedSignCalculator(SignCalculator):
    name = "refined"

    def _calc(self, prev_hunk, hunk, next_hunk, min_lnum, max_lnum, untracked):
        start = hunk.added.start
        added, removed = hunk.added.count, hunk.removed.count

        cend = change_end(hunk)

        # consecutive deletes only mark the last one of the run
        topdelete = (
            hunk.kind == "delete"
            and (start == 0 or (prev_hunk is not None and change_end(prev_hunk) == start))
            and (next_hunk is None or next_hunk.added.start != start + 1)
        )

        if topdelete and min_lnum == 1:
            min_lnum = 0

        signs = []
        for lnum in _lines(max(start, min_lnum), cend, max_lnum):
            changedelete = hunk.kind == "change" and (
                (removed > added and lnum == cend)
                or (prev_hunk is not None and prev_hunk.added.start == 0)
            )

            kind: SignKind
            if topdelete:
                kind = "topdelete"
            elif changedelete:
                kind = "changedelete"
            elif untracked:
                kind = "untracked"
            else:
                kind = hunk.kind

            signs.append(
                Sign(
                    kind=kind,
                    line_number=lnum + 1 if topdelete else lnum,
                    count=_first_count(hunk, lnum),
                )
            )

        signs.extend(_tail_add_signs(hunk, cend, min_lnum, max_lnum))
        return signs


SIGN_CALCULATORS: dict[str, type[SignCalculator]] = {
    BaselineSignCalculator.name: BaselineSignCalculator,
    RefinedSignCalculator.name: RefinedSignCalculator,
}


def get_sign_calculator(name: str) -> SignCalculator:
    try:
        return SIGN_CALCULATORS[name]()
    except KeyError:
        raise unknown_sign_algorithm(name) from None


def calc_signs(
    prev_hunk: Hunk | None,
    hunk: Hunk,
    next_hunk: Hunk | None,
    min_lnum: int | None = None,
    max_lnum: int | None = None,
    untracked: bool = False,
    calculator: SignCalculator | None = None,
) -> list[Sign]:
    """Calculate the signs for one hunk, using the baseline algorithm unless told otherwise."""
    calculator = calculator or BaselineSignCalculator()
    return calculator.calc_signs(
        prev_hunk, hunk, next_hunk, min_lnum, max_lnum, untracked
    )


def calc_all_signs(
    hunks: Sequence[Hunk],
    min_lnum: int | None = None,
    max_lnum: int | None = None,
    untracked: bool = False,
    calculator: SignCalculator | None = None,
) -> list[Sign]:
    """Calculate the signs for every hunk of a list, feeding each its neighbours."""
    calculator = calculator or BaselineSignCalculator()

    signs: list[Sign] = []
    for i, hunk in enumerate(hunks):
        prev_hunk = hunks[i - 1] if i > 0 else None
        next_hunk = hunks[i + 1] if i + 1 < len(hunks) else None
        signs.extend(
            calculator.calc_signs(
                prev_hunk, hunk, next_hunk, min_lnum, max_lnum, untracked
            )
        )
    return signs
