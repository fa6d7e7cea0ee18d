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

from hypothesis import given
from hypothesis import strategies as st

from gutterdiff.core.hunks.factory import create_hunk
from gutterdiff.core.hunks.models import Summary
from gutterdiff.core.hunks.summary import get_summary


def test_summary_of_each_kind():
    hunks = [
        create_hunk(4, 0, 5, 3),
        create_hunk(10, 2, 12, 0),
        create_hunk(20, 3, 19, 1),
        create_hunk(30, 1, 27, 4),
    ]

    assert get_summary(hunks) == Summary(added=3 + 3, changed=1 + 1, removed=2 + 2)


def test_summary_of_nothing():
    assert get_summary(None) == Summary(0, 0, 0)
    assert get_summary([]) == Summary(0, 0, 0)


def test_summary_format():
    assert Summary(3, 1, 2).format() == "+3 ~1 -2"
    assert Summary(0, 0, 4).format() == "-4"
    assert Summary(1, 0, 0).format() == "+1"
    assert Summary().format() == ""


# (removed count, added count) pairs that make up a valid hunk
counts = st.tuples(
    st.integers(min_value=0, max_value=200), st.integers(min_value=0, max_value=200)
).filter(lambda c: c != (0, 0))


@given(st.lists(counts, max_size=30))
def test_summary_accounts_for_every_line(pairs):
    hunks = []
    line = 1
    for removed, added in pairs:
        hunks.append(create_hunk(line, removed, line, added))
        line += max(removed, added) + 1

    summary = get_summary(hunks)

    assert summary.added == sum(max(a - r, 0) for r, a in pairs)
    assert summary.removed == sum(max(r - a, 0) for r, a in pairs)
    assert summary.changed == sum(min(r, a) for r, a in pairs)
    assert summary.added + summary.changed == sum(a for _, a in pairs)
    assert summary.removed + summary.changed == sum(r for r, _ in pairs)
