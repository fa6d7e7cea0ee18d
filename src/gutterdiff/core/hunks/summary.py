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

from gutterdiff.core.hunks.models import Hunk, Summary


def get_summary(hunks: Iterable[Hunk] | None) -> Summary:
    """Total up added, changed and removed lines over a hunk list."""
    added = changed = removed = 0

    for hunk in hunks or []:
        if hunk.kind == "add":
            added += hunk.added.count
        elif hunk.kind == "delete":
            removed += hunk.removed.count
        elif hunk.kind == "change":
            # the overlapping part counts as changed, the rest as added/removed
            delta = min(hunk.added.count, hunk.removed.count)
            changed += delta
            added += hunk.added.count - delta
            removed += hunk.removed.count - delta

    return Summary(added=added, changed=changed, removed=removed)
