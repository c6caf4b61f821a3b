# SPDX-License-Identifier: MIT
"""Emoji record type."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Emoji:
    """Class representing a single emoji parsed from a Unicode data file."""

    #: Normalized description, used as the snippet keyword and in the
    #: snippet file name.
    description: str

    #: Subgroup this emoji was listed under (emoji-test.txt only).
    subgroup: Optional[str] = None

    #: The emoji itself, as written in the comment of an emoji-test.txt line.
    glyph: Optional[str] = None

    #: Space-separated hexadecimal code points (emoji-sequences.txt only).
    #: For ranges this is one of the two literal endpoints.
    code_points: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Name shown for the snippet inside Alfred."""
        if self.subgroup:
            return f"({self.subgroup}) {self.description}"
        return self.description
