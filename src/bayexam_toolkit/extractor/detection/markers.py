"""
Module: extractor.detection.markers

Purpose:
    Recognizers for the keyword lines that follow a question's options:
    the answer line, explanation and wrong-statement annotations, the
    explanation-block glyph and the "N - X" answer-key summary. Turkish
    and English keywords are both accepted.

Key Functions:
    - match_answer_line(): Remainder of an answer line, or None
    - match_annotation(): Label/remainder of an explanation-style line
    - is_explanation_glyph() / is_answer_key(): Explanation terminators

Used By:
    - extractor.detection.starts: Bullet lines that are really answers
    - extractor.detection.answers: Answer remainder parsing
    - extractor.structuring.collectors: Stage stop predicates
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..rules import Rule, first_match, matches_any
from .text import COLON, UPPER_LETTERS

# "Cevap" may omit the colon; "Answer" needs one so prose like
# "Answer the following" is not taken as an answer line.
ANSWER_RULES: tuple[Rule[str], ...] = (
    Rule(
        "cevap",
        re.compile(
            rf"^[*_\s]*(?:doğru\s+)?cevap\b[*_]*\s*{COLON}?\s*(?P<rest>.*)$",
            re.IGNORECASE,
        ),
        lambda m: m.group("rest"),
    ),
    Rule(
        "answer",
        re.compile(
            rf"^[*_\s]*(?:correct\s+)?answer[*_]*\s*{COLON}\s*(?P<rest>.*)$",
            re.IGNORECASE,
        ),
        lambda m: m.group("rest"),
    ),
)

# Inline "Açıklama:" / "Explanation:" segment inside an answer line
INLINE_EXPLANATION = re.compile(
    rf"A[çc][ıi]klama\s*{COLON}?\s*|Explanation\s*{COLON}\s*",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Annotation:
    """
    An explanation-style line.

    Attributes:
        kind: "explanation" or "wrong_statement"
        label: Keyword as written in the source, e.g. "Yanlış ifade"
        text: Remainder after the keyword and colon
    """
    kind: str
    label: str
    text: str


def _annotation(kind: str):
    def extract(match: re.Match) -> Annotation:
        return Annotation(kind, match.group("label"), match.group("rest").strip())
    return extract


ANNOTATION_RULES: tuple[Rule[Annotation], ...] = (
    Rule(
        "explanation",
        re.compile(
            rf"^[*_\s]*(?P<label>A[çc][ıi]klama|AçExplanation|Explanation)\b[*_]*\s*{COLON}?[*_]*\s*(?P<rest>.*)$",
            re.IGNORECASE,
        ),
        _annotation("explanation"),
    ),
    Rule(
        "wrong_statement",
        re.compile(
            rf"^[*_\s]*(?P<label>Yanlış\s+ifade|Wrong\s+statement)\b[*_]*\s*{COLON}?[*_]*\s*(?P<rest>.*)$",
            re.IGNORECASE,
        ),
        _annotation("wrong_statement"),
    ),
)

# Label written in front of every wrong-statement line, whatever the
# source spelling
WRONG_STATEMENT_LABEL = "Yanlış ifade"

EXPLANATION_GLYPH = "\U0001f7e6"  # large blue square
ANSWER_KEY = re.compile(rf"^\d+\s*-\s*[{UPPER_LETTERS}]")


def match_answer_line(line: str) -> Optional[str]:
    """
    Match an answer line.

    Returns:
        The text after the keyword (may be empty), or None if ``line`` is
        not an answer line

    Example:
        >>> match_answer_line("Doğru cevap： B")
        'B'
    """
    hit = first_match(ANSWER_RULES, line)
    return None if hit is None else hit.value


def is_answer_line(line: str) -> bool:
    return matches_any(ANSWER_RULES, line)


def match_annotation(line: str) -> Optional[Annotation]:
    hit = first_match(ANNOTATION_RULES, line)
    return None if hit is None else hit.value


def is_annotation_line(line: str) -> bool:
    return matches_any(ANNOTATION_RULES, line)


def is_explanation_glyph(line: str) -> bool:
    return line.lstrip().startswith(EXPLANATION_GLYPH)


def is_answer_key(line: str) -> bool:
    return ANSWER_KEY.match(line.strip()) is not None
