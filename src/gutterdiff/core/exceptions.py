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
Exception hierarchy for gutterdiff.

Malformed input coming from the diff producer is a hard failure and is
raised as a HunkParseError. Configuration and CLI argument problems get
their own categories so the CLI can report them cleanly.
"""

import contextlib

import typer
from loguru import logger


class GutterDiffError(Exception):
    """
    Base exception for all gutterdiff errors.

    All gutterdiff-specific exceptions inherit from this class
    so callers can catch them in one place.
    """

    def __init__(self, message: str, details: str | None = None):
        """
        Initialize a GutterDiffError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class HunkParseError(GutterDiffError):
    """
    Raised when a unified diff hunk header cannot be parsed.

    This always means the upstream diff output is malformed.
    """

    pass


class ValidationError(GutterDiffError):
    """
    Input validation errors.

    Raised when user input fails validation checks,
    such as an inverted line range or a missing file.
    """

    pass


class ConfigurationError(GutterDiffError):
    """
    Configuration-related errors.

    Raised when configuration values are invalid
    or name an unknown option.
    """

    pass


def invalid_hunk_header(line: str, reason: str) -> HunkParseError:
    """Create a HunkParseError for an unparseable header line."""
    return HunkParseError(
        f"Invalid hunk header: {line!r}",
        f"{reason}. Expected the form '@@ -A[,B] +C[,D] @@'",
    )


def unknown_sign_algorithm(name: str) -> ConfigurationError:
    """Create a ConfigurationError for an unknown sign algorithm name."""
    return ConfigurationError(
        f"Unknown sign algorithm: {name}",
        "Valid values are 'baseline' and 'refined'",
    )


def invalid_line_range(top: int, bot: int) -> ValidationError:
    """Create a ValidationError for an inverted or non-positive line range."""
    return ValidationError(
        f"Invalid line range: {top}-{bot}",
        "The range must satisfy 1 <= top <= bot",
    )


@contextlib.contextmanager
def handle_gutterdiff_exception(exit_on_fail: bool = True):
    """Log gutterdiff errors and turn them into a non-zero CLI exit."""
    try:
        yield
    except GutterDiffError as e:
        logger.error(e.message)
        if e.details:
            logger.debug(e.details)
        if exit_on_fail:
            raise typer.Exit(1) from e
        raise
