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

from collections.abc import Sequence

from gutterdiff.core.hunks.models import Hunk


def compare_heads(a: Sequence[Hunk] | None, b: Sequence[Hunk] | None) -> bool:
    """Return True if the two hunk lists differ by their headers."""
    if (a is None) != (b is None):
        return True
    if a is None or b is None:
        return False
    if len(a) != len(b):
        return True
    return any(ah.header != bh.header for ah, bh in zip(a, b))


def _same_new_side(a: Hunk, b: Hunk) -> bool:
    if a.added.start != b.added.start:
        return False
    if a.added.count != b.added.count:
        return False

    for i in range(a.added.count):
        a_line = a.added.lines[i] if i < len(a.added.lines) else None
        b_line = b.added.lines[i] if i < len(b.added.lines) else None
        if a_line != b_line:
            return False

    return True


def filter_common(
    a: Sequence[Hunk] | None, b: Sequence[Hunk] | None
) -> list[Hunk] | None:
    """
    Return the hunks of ``a`` that are not reflected identically in ``b``.

    Only the new side of each hunk is compared, so hunks that produce the same
    buffer content are filtered even when their old-side anchors differ.

    Eg. given:

        a = ['@@ -24 +25,1 @@', '@@ -32 +34,1 @@', '@@ -37 +40,1 @@']
        b = ['@@ -26 +25,1 @@']

    a[0] and b[0] both introduce +25,1 with the same content, so the result is
    ['@@ -32 +34,1 @@', '@@ -37 +40,1 @@'].
    """
    if a is None and b is None:
        return None

    a, b = a or [], b or []
    a_i = b_i = 0
    ret: list[Hunk] = []

    while a_i < len(a):
        if b_i >= len(b):
            # b is exhausted, the rest of a passes through
            ret.extend(a[a_i:])
            break

        a_h, b_h = a[a_i], b[b_i]

        if a_h.added.start > b_h.added.start:
            b_i += 1
        elif a_h.added.start < b_h.added.start:
            ret.append(a_h)
            a_i += 1
        else:
            # a_h is kept whole even when b_h only covers part of it
            if not _same_new_side(a_h, b_h):
                ret.append(a_h)
            a_i += 1
            b_i += 1

    return ret
