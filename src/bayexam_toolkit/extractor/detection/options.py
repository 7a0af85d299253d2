"""
Module: extractor.detection.options

Purpose:
    Option line detection - recognizes labeled multiple-choice options and
    splits run-on lines carrying several options ("A) x B) y C) z").
    Detects the inline correct-answer markers some sources use instead of
    a separate answer line: a trailing single asterisk or a "++" token.

Key Functions:
    - is_option_line(): Cheap test used as a stop predicate
    - parse_option_line(): All options on one line, markers resolved

Key Classes:
    - ParsedOption: Option plus whether it carried a correct marker

Used By:
    - extractor.structuring.collectors: Option collection stage
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from bayexam_toolkit.core.models import Option

from .text import LETTERS, collapse_whitespace, strip_emphasis

OPTION_LINE = re.compile(
    rf"^[*_]*(?P<label>[{LETTERS}])[*_]*(?P<sep>[.):\-])(?P<rest>.*)$"
)

# A further option token inside the text of a run-on line. It must sit
# after whitespace; glued text ("B)Blue") is allowed unless it continues
# an abbreviation ("e.g.").
NEXT_OPTION_TOKEN = re.compile(
    rf"(?<=\s)[*_]*(?P<label>[{LETTERS}])[*_]*(?P<sep>[.):\-])"
    rf"(?=\s|$|(?![{LETTERS}][.):\-])\S)"
)

# "++" at the start of the text, or as a standalone token elsewhere.
# "C++" is an option text, not a marker.
DOUBLE_PLUS_MARKER = re.compile(r"^\(?\+\+\)?|(?<=\s)\(?\+\+\)?(?=\s|$)")
TRAILING_STAR_MARKER = re.compile(r"(?<!\*)\*$")

# Emphasis glued to the first word ("*Paris*") closes at the end of the
# text, so a trailing star there is emphasis rather than a marker.
_ATTACHED_EMPHASIS = re.compile(r"^\s*[*_]+(?=[^\s*_])")


@dataclass(frozen=True)
class ParsedOption:
    """
    Option recognized on a line.

    Attributes:
        option: The option with marker glyphs removed
        marked: True if the source flagged it as the correct answer
    """
    option: Option
    marked: bool = False


def is_option_line(line: str) -> bool:
    return OPTION_LINE.match(line.strip()) is not None


def _split_tokens(first_label: str, sep: str, rest: str) -> List[tuple[str, str]]:
    """
    Split option text at further option tokens.

    A token only counts when it uses the same separator as the first
    option and its label comes later in the alphabet than the previous
    one, so "A) 5 m. B) 10 m." or "A) Vitamin C: yes" stay intact.
    """
    tokens: List[tuple[str, str]] = []
    label, start = first_label, 0
    for match in NEXT_OPTION_TOKEN.finditer(rest):
        candidate = match.group("label").upper()
        if match.group("sep") != sep or candidate <= label:
            continue
        tokens.append((label, rest[start:match.start()]))
        label, start = candidate, match.end()
    tokens.append((label, rest[start:]))
    return tokens


def clean_option_text(raw: str) -> tuple[str, bool]:
    """
    Remove marker glyphs and emphasis from option text.

    Returns:
        (text, marked) where marked tells whether a correct-answer glyph
        was present

    Example:
        >>> clean_option_text(" London*")
        ('London', True)
        >>> clean_option_text(" *Paris*")
        ('Paris', False)
    """
    attached = _ATTACHED_EMPHASIS.match(raw) is not None
    text = raw.strip()
    marked = False

    if DOUBLE_PLUS_MARKER.search(text):
        marked = True
        text = collapse_whitespace(DOUBLE_PLUS_MARKER.sub(" ", text))

    if not attached and TRAILING_STAR_MARKER.search(text):
        marked = True
        text = text[:-1].rstrip()

    return strip_emphasis(text), marked


def parse_option_line(line: str) -> List[ParsedOption]:
    """
    Parse every option on a line.

    Args:
        line: Stripped body line

    Returns:
        Options in line order; empty if the line is not an option line

    Example:
        >>> [p.option.label for p in parse_option_line("a) Red b) Blue c) Green")]
        ['A', 'B', 'C']
    """
    match = OPTION_LINE.match(line.strip())
    if match is None:
        return []

    parsed: List[ParsedOption] = []
    first_label = match.group("label").upper()
    for label, raw in _split_tokens(first_label, match.group("sep"), match.group("rest")):
        text, marked = clean_option_text(raw)
        parsed.append(ParsedOption(Option(label, text), marked))
    return parsed
