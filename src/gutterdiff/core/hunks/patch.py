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

from gutterdiff.constants import NO_NEWLINE_MARKER, PLACEHOLDER_INDEX_HASH
from gutterdiff.core.hunks.models import Hunk, PatchResult
from gutterdiff.core.hunks.utils import strip_cr


def create_patch(
    relpath: str, hunks: Sequence[Hunk], mode_bits: str, invert: bool = False
) -> PatchResult:
    """
    Serialize hunks into a unified diff that can be fed to ``git apply``.

    The index line carries a placeholder hash, the patch is only meant for
    local application. Each hunk's new-side start is its old start shifted by
    the net line delta of all hunks before it.

    Args:
        relpath: path of the file relative to the repository root
        hunks: the hunks to serialize, in ascending order
        mode_bits: file mode for the index line, e.g. "100644"
        invert: swap the removed and added sides to build a reverse patch

    Returns:
        A PatchResult holding the patch lines and copies of the hunks whose
        removed.start has been moved to the offset-corrected value. The input
        hunks are left untouched.
    """
    lines = [
        f"diff --git a/{relpath} b/{relpath}",
        f"index {PLACEHOLDER_INDEX_HASH}..{PLACEHOLDER_INDEX_HASH} {mode_bits}",
        f"--- a/{relpath}",
        f"+++ b/{relpath}",
    ]
    corrected: list[Hunk] = []

    offset = 0
    for hunk in hunks:
        start = hunk.removed.start
        pre_count, now_count = hunk.removed.count, hunk.added.count

        if hunk.kind == "add":
            start += 1

        pre_lines, now_lines = hunk.removed.lines, hunk.added.lines

        if invert:
            pre_count, now_count = now_count, pre_count
            pre_lines, now_lines = now_lines, pre_lines

        lines.append(f"@@ -{start},{pre_count} +{start + offset},{now_count} @@")

        lines.extend(f"-{line}" for line in pre_lines)
        if hunk.removed.no_newline_at_eof:
            lines.append(NO_NEWLINE_MARKER)

        lines.extend(f"+{line}" for line in now_lines)
        if hunk.added.no_newline_at_eof:
            lines.append(NO_NEWLINE_MARKER)

        updated = hunk.copy()
        updated.removed.start = start + offset
        corrected.append(updated)

        offset += now_count - pre_count

    return PatchResult(lines=lines, hunks=corrected)


def patch_lines(hunk: Hunk, file_format: str) -> list[str]:
    """The -/+ body of a single hunk, without header."""
    lines = [f"-{line}" for line in hunk.removed.lines]
    lines.extend(f"+{line}" for line in hunk.added.lines)

    if file_format == "dos":
        lines = strip_cr(lines)
    return lines
