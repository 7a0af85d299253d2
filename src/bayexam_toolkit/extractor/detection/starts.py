"""
Module: extractor.detection.starts

Purpose:
    Question start detection - recognizes the line that opens a new
    question block. Three source conventions are supported and evaluated
    in a fixed precedence order:

    1. numbered: "1)", "**12.**", "- 3)"
    2. soru:     "Soru 4:", "S-7)"
    3. bullet:   "• Aşağıdakilerden hangisi..." (no digits)

Key Functions:
    - detect_block_start(): Test one line against the enabled rules

Key Classes:
    - BlockStart: Immutable result of a recognized start line

Used By:
    - extractor.structuring.segmenter: Splits documents into blocks
    - extractor.structuring.collectors: Explanation never runs into a new question
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from ..rules import Rule, first_match
from .markers import is_annotation_line, is_answer_line
from .text import COLON, LETTERS, UPPER_LETTERS, strip_emphasis

# Dash, en dash, em dash, bullet, small square, pointer
BULLET_GLYPHS = "\\-\u2013\u2014\u2022\u25aa\u25ba"
_OPTIONAL_BULLET = rf"(?:[{BULLET_GLYPHS}]\s*)?"

NUMBERED_PATTERN = re.compile(
    rf"^\s*{_OPTIONAL_BULLET}[*_\s]*(?P<number>\d+)[*_]*\s*[.)](?!\d)(?P<rest>.*)$"
)
SORU_PATTERN = re.compile(
    rf"^\s*{_OPTIONAL_BULLET}[*_\s]*(?:soru\s*|s\s*-\s*)(?P<number>\d+)[*_]*\s*[.):\-]?(?P<rest>.*)$",
    re.IGNORECASE,
)
BULLET_PATTERN = re.compile(
    rf"^\s*[*_]*[{BULLET_GLYPHS}][*_]*\s+"
    rf"(?![*_]*[{LETTERS}][*_]*[.):\-](?:\s|$))"
    rf"(?P<rest>[*_]*[{UPPER_LETTERS}].*)$"
)

# Boilerplate some sources put between the ordinal and the prompt
BOILERPLATE_PREFIX = re.compile(rf"^(?:soru(?:\s+metni)?|question)\s*{COLON}\s*", re.IGNORECASE)


@dataclass(frozen=True)
class BlockStart:
    """
    Recognized start-of-question line.

    Attributes:
        number: Declared ordinal, or None when the convention has no digits
        leading_text: The line with marker and boilerplate prefix removed
        rule: Name of the rule that recognized the line

    Example:
        >>> detect_block_start("**3)** Soru: Başkent?")
        BlockStart(number=3, leading_text='Başkent?', rule='numbered')
    """
    number: Optional[int]
    leading_text: str
    rule: str = ""


def clean_leading_text(rest: str) -> str:
    """Strip emphasis and boilerplate prefix from the text after a marker."""
    text = strip_emphasis(rest)
    return strip_emphasis(BOILERPLATE_PREFIX.sub("", text))


def _numeric_start(match: re.Match) -> BlockStart:
    return BlockStart(int(match.group("number")), clean_leading_text(match.group("rest")))


def _bullet_start(match: re.Match) -> Optional[BlockStart]:
    rest = match.group("rest")
    if is_answer_line(rest) or is_annotation_line(rest):
        return None
    return BlockStart(None, clean_leading_text(rest))


BLOCK_START_RULES: tuple[Rule[BlockStart], ...] = (
    Rule("numbered", NUMBERED_PATTERN, _numeric_start),
    Rule("soru", SORU_PATTERN, _numeric_start),
    Rule("bullet", BULLET_PATTERN, _bullet_start),
)


def select_rules(names: Sequence[str]) -> tuple[Rule[BlockStart], ...]:
    """Return the enabled rules, keeping the fixed precedence order."""
    return tuple(rule for rule in BLOCK_START_RULES if rule.name in names)


def detect_block_start(
    line: str,
    rules: Sequence[Rule[BlockStart]] = BLOCK_START_RULES,
) -> Optional[BlockStart]:
    """
    Detect whether ``line`` opens a new question block.

    Args:
        line: Raw line (leading whitespace and emphasis tolerated)
        rules: Enabled rules in precedence order

    Returns:
        BlockStart for the highest-precedence rule that matches, else None
    """
    hit = first_match(rules, line)
    if hit is None:
        return None
    return BlockStart(hit.value.number, hit.value.leading_text, hit.rule)
