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

from dataclasses import dataclass
from typing import ClassVar, Literal

from pydantic import BaseModel

from gutterdiff.core.hunks.signs import SignCalculator, get_sign_calculator
from gutterdiff.core.hunks.word_diff import WordDiffEngine, run_word_diff


class GutterConfig(BaseModel):
    sign_algorithm: Literal["baseline", "refined"] = "baseline"
    word_diff: bool = True
    file_format: Literal["unix", "dos", "mac"] = "unix"
    wrap: bool = True
    verbose: bool = False
    silent: bool = False

    descriptions: ClassVar[dict[str, str]] = {
        "sign_algorithm": "Sign placement algorithm (baseline or refined)",
        "word_diff": "Highlight changed characters inside previewed lines",
        "file_format": "Line ending format of the file (unix, dos or mac); dos strips carriage returns",
        "wrap": "Wrap around the ends of the hunk list when navigating",
        "verbose": "Enable verbose logging output",
        "silent": "Do not output any log text to the console",
    }


@dataclass(frozen=True)
class GutterContext:
    config: GutterConfig
    sign_calculator: SignCalculator
    # None when intraline highlighting is disabled
    word_diff: WordDiffEngine | None

    @classmethod
    def from_config(cls, config: GutterConfig) -> "GutterContext":
        return cls(
            config=config,
            sign_calculator=get_sign_calculator(config.sign_algorithm),
            word_diff=run_word_diff if config.word_diff else None,
        )
