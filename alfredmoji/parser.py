# SPDX-License-Identifier: MIT
"""
Parsers for the Unicode emoji data files.

Two formats are supported:

- ``emoji-test.txt``, where every data line carries a qualification status and
  a comment with the emoji itself, its version and its name, and where
  ``# subgroup:`` header lines group the data lines that follow them::

      # subgroup: face-smiling
      1F600 ; fully-qualified # 😀 E1.0 grinning face

- ``emoji-sequences.txt``, where every data line has three semicolon-separated
  fields, the first and last of which may hold a ``A..B`` range::

      231A..231B ; Basic_Emoji ; watch..hourglass done # E0.6 [2] (⌚..⌛)

Lines that are not emoji definitions are skipped without error; both files
are full of comments and blank lines.
"""

from .emoji import Emoji

from dataclasses import dataclass
import re
from typing import Iterable, Iterator, List, Optional, Tuple

SUBGROUP_PREFIX = "# subgroup:"
FULLY_QUALIFIED = "fully-qualified"
EXCLUDED_STATUSES = ("minimally-qualified", "unqualified", "component")
RANGE_SEPARATOR = ".."

# '# 😀 E1.0 grinning face'
_ANNOTATION_RE = re.compile(r"^\s*(.+?) E\d+\.\d+ (.+)")
_WHITESPACE_RE = re.compile(r"\s+")

# Characters that are dropped from descriptions, since they end up in file
# names and snippet keywords.
_JUNK_CHARACTERS = (",", ":", "’", "‘", "“", "”")


@dataclass(frozen=True)
class ParserState:
    """State carried from one emoji-test.txt line to the next."""

    #: Cleaned-up name of the last subgroup header seen, if any.
    current_subgroup: Optional[str] = None


def strip_punctuation(text: str) -> str:
    """Remove commas, colons and curly quotes from text."""
    for char in _JUNK_CHARACTERS:
        text = text.replace(char, "")
    return text


def normalize_description(description: str) -> str:
    """
    Turn an emoji name into something usable as a file name and a keyword.

    >>> normalize_description("flag: United States")
    'flag-United-States'
    """
    description = _WHITESPACE_RE.sub("-", description.strip())
    return strip_punctuation(description)


def clean_subgroup(name: str) -> str:
    """Clean up a subgroup name taken from a ``# subgroup:`` header."""
    return name.strip().replace("&", "and").replace(" ", "-")


def extract_emoji_and_description(annotation: str) -> Optional[Tuple[str, str]]:
    """
    Extract the emoji and its normalized description from the comment part
    of an emoji-test.txt line (``😀 E1.0 grinning face``).

    :returns: an ``(emoji, description)`` tuple, or None if the comment does
        not have the expected shape.
    """
    match = _ANNOTATION_RE.match(annotation)
    if not match:
        return None

    return match.group(1).strip(), normalize_description(match.group(2))


def parse_test_line(
    line: str, state: ParserState
) -> Tuple[ParserState, Optional[Emoji]]:
    """
    Parse a single line of emoji-test.txt.

    Subgroup headers produce a new state and no emoji. Every other line
    leaves the state as it is and produces at most one emoji; only
    fully-qualified entries are kept.

    :returns: a ``(state, emoji)`` tuple; ``emoji`` is None for skipped lines.
    """
    if line.startswith(SUBGROUP_PREFIX):
        subgroup = clean_subgroup(line[len(SUBGROUP_PREFIX) :])
        return ParserState(current_subgroup=subgroup), None

    if line.startswith("#") or ";" not in line or "#" not in line:
        return state, None

    if any(status in line for status in EXCLUDED_STATUSES):
        return state, None

    # 1F600 ; fully-qualified # 😀 E1.0 grinning face
    _, rest = line.split(";", 1)
    status, _, annotation = rest.partition("#")
    if status.strip() != FULLY_QUALIFIED:
        return state, None

    extracted = extract_emoji_and_description(annotation)
    if not extracted:
        return state, None

    glyph, description = extracted
    return state, Emoji(
        description=description,
        subgroup=state.current_subgroup,
        glyph=glyph,
    )


def parse_test_lines(
    lines: Iterable[str], state: Optional[ParserState] = None
) -> Iterator[Emoji]:
    """Parse all lines of emoji-test.txt, yielding the emoji found in order."""
    if state is None:
        state = ParserState()

    for line in lines:
        state, emoji = parse_test_line(line, state)
        if emoji is not None:
            yield emoji


def parse_sequence_line(line: str) -> List[Emoji]:
    """
    Parse a single line of emoji-sequences.txt.

    Ranges are kept as their two literal endpoints and are not expanded into
    the code points between them. Code points and descriptions are paired
    by position; code points without a matching description are dropped, so
    ``231A..231B ; Basic_Emoji ; watch`` only yields ``231A``.
    """
    if line.startswith("#"):
        return []

    fields = line.split(";")
    if len(fields) < 3:
        return []

    code_points = fields[0].strip()
    description = fields[2].split("#")[0].strip()

    code_point_endpoints = code_points.split(RANGE_SEPARATOR, 1)
    description_endpoints = description.split(RANGE_SEPARATOR, 1)

    emoji_list = []
    for i, code_point in enumerate(code_point_endpoints):
        if i >= len(description_endpoints):
            break
        emoji_list.append(
            Emoji(
                description=strip_punctuation(description_endpoints[i].strip()),
                code_points=code_point.strip(),
            )
        )

    return emoji_list


def parse_sequence_lines(lines: Iterable[str]) -> Iterator[Emoji]:
    """Parse all lines of emoji-sequences.txt, yielding the emoji found in order."""
    for line in lines:
        yield from parse_sequence_line(line)


def resolve_code_points(code_points: str) -> str:
    """
    Convert whitespace-separated hexadecimal code points to the characters
    they stand for. Tokens that are not valid code points are skipped.

    >>> resolve_code_points("1F1FA 1F1F8")
    '🇺🇸'
    """
    chars = []
    for token in code_points.split():
        try:
            chars.append(chr(int(token, 16)))
        except (ValueError, OverflowError):
            continue

    return "".join(chars)
