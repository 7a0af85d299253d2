"""
Module: extractor.structuring.collectors

Purpose:
    The per-block parse stages. Each collector consumes lines from a shared
    LineCursor and leaves it positioned at the first line it did not use:

    1. collect_question_text()  prompt lines
    2. collect_options()        option lines, inline markers
    3. find_answer_line()       explicit "Cevap:" / "Answer:" line
    4. collect_explanation()    trailing explanation lines

Key Classes:
    - OptionCollection: Options of a block plus the marked answer, if any

Used By:
    - extractor.structuring.block_parser: Runs the stages in order
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from bayexam_toolkit.core.models import Option

from ..cursor import LineCursor
from ..detection.markers import (
    WRONG_STATEMENT_LABEL,
    is_annotation_line,
    is_answer_key,
    is_answer_line,
    is_explanation_glyph,
    match_annotation,
    match_answer_line,
)
from ..detection.options import is_option_line, parse_option_line
from ..detection.starts import BLOCK_START_RULES, BlockStart, detect_block_start
from ..detection.text import join_fragments, strip_emphasis
from ..rules import Rule


@dataclass(frozen=True)
class OptionCollection:
    """
    Options collected for one block.

    Attributes:
        options: Options in source order, one per label
        marked_answer: First option flagged correct by an inline marker
    """
    options: tuple[Option, ...] = ()
    marked_answer: Optional[Option] = None


def is_question_terminator(line: str) -> bool:
    """True for lines that end the prompt: options, answers, annotations, glyph."""
    return (
        is_option_line(line)
        or is_answer_line(line)
        or is_annotation_line(line)
        or is_explanation_glyph(line)
    )


def collect_question_text(cursor: LineCursor) -> str:
    """
    Consume prompt lines up to the first terminator line.

    Blank lines are skipped. Each line loses its surrounding emphasis and
    the lines are joined with single spaces.
    """
    lines = cursor.take_while(lambda line: not is_question_terminator(line))
    return join_fragments(strip_emphasis(line) for line in lines)


def collect_options(cursor: LineCursor) -> OptionCollection:
    """
    Consume consecutive option lines (blank lines skipped).

    A repeated label replaces the earlier option's text and keeps its
    position. The first option carrying a correct-answer marker becomes
    the marked answer; later markers are ignored.
    """
    by_label: Dict[str, Option] = {}
    marked: Optional[Option] = None

    while True:
        cursor.skip_blank()
        line = cursor.peek()
        if line is None:
            break
        parsed = parse_option_line(line)
        if not parsed:
            break
        cursor.advance()
        for item in parsed:
            by_label[item.option.label] = item.option
            if item.marked and marked is None:
                marked = item.option

    return OptionCollection(tuple(by_label.values()), marked)


def find_answer_line(cursor: LineCursor) -> Optional[str]:
    """
    Find and consume the next answer line.

    Returns:
        The answer line's remainder, or None when the block has no answer
        line, in which case the cursor does not move
    """
    index = cursor.find(is_answer_line)
    if index is None:
        return None
    cursor.seek(index)
    return match_answer_line(cursor.advance())


def collect_explanation(
    cursor: LineCursor,
    start_rules: Sequence[Rule[BlockStart]] = BLOCK_START_RULES,
) -> str:
    """
    Consume explanation lines.

    Stops at the explanation glyph, at an "N - X" answer-key line or at a
    question start line. Explanation keywords are stripped, wrong-statement
    lines are rewritten as "Yanlış ifade: <text>", other lines are kept as-is.
    """
    fragments: List[str] = []

    def is_explanation_line(line: str) -> bool:
        return not (
            is_explanation_glyph(line)
            or is_answer_key(line)
            or detect_block_start(line, start_rules) is not None
        )

    for line in cursor.take_while(is_explanation_line):
        annotation = match_annotation(line)
        if annotation is None:
            fragments.append(line)
        elif annotation.kind == "wrong_statement":
            fragments.append(
                f"{WRONG_STATEMENT_LABEL}: {annotation.text}" if annotation.text else line
            )
        elif annotation.text:
            fragments.append(annotation.text)

    return join_fragments(fragments)
