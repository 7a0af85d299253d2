"""
Module: extractor.structuring.block_parser

Purpose:
    Parses one Block into question fields by running the stage collectors
    over a single cursor, then applies the answer fallback rules.

Key Functions:
    - parse_block(): Block -> ParsedBlock

Key Classes:
    - ParsedBlock: Question fields of a block, before an id is assigned

Used By:
    - extractor.pipeline: Called once per block
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from bayexam_toolkit.core.models import Answer, Block, Option

from ..cursor import LineCursor
from ..detection.answers import ResolvedAnswer, resolve_answer
from ..detection.starts import BLOCK_START_RULES, BlockStart
from ..detection.text import join_fragments, strip_emphasis
from ..rules import Rule
from .collectors import (
    collect_explanation,
    collect_options,
    collect_question_text,
    find_answer_line,
)

_LEADING_ORDINAL = re.compile(r"^\s*\d+\s*[.)]\s*")


@dataclass(frozen=True)
class ParsedBlock:
    """
    Fields extracted from one block.

    Attributes:
        number: Declared ordinal of the block
        question: Prompt text
        options: Options in source order
        answer: Resolved answer
        explanation: Explanation text
    """
    number: int
    question: str
    options: tuple[Option, ...]
    answer: Answer
    explanation: str

    @property
    def is_emittable(self) -> bool:
        """True if both the question and the answer text are present."""
        return bool(self.question) and bool(self.answer.text)


def fallback_question_text(leading_text: str) -> str:
    """Prompt taken from the start line when the body holds none."""
    return strip_emphasis(_LEADING_ORDINAL.sub("", strip_emphasis(leading_text)))


def parse_block(
    block: Block,
    *,
    start_rules: Sequence[Rule[BlockStart]] = BLOCK_START_RULES,
    join_leading_text: bool = False,
) -> ParsedBlock:
    """
    Parse a block into question fields.

    An explicit answer line always wins; the option flagged by an inline
    marker is used only when there is no answer line or the line resolves
    to neither a label nor a text. Without an answer line the explanation
    is empty.

    Args:
        block: Block from the segmenter
        start_rules: Block-start rules; explanation stops at a start line
        join_leading_text: Prefix the start line's text to the body prompt

    Returns:
        ParsedBlock; check ``is_emittable`` before turning it into a record

    Example:
        >>> block = Block(1, "What color is the sky?", ("A) Red", "B) Blue", "Answer: B"))
        >>> parse_block(block).answer
        Answer(label='B', text='Blue')
    """
    cursor = LineCursor(block.body)

    body_text = collect_question_text(cursor)
    leading = fallback_question_text(block.leading_text)
    if join_leading_text:
        question = join_fragments([leading, body_text])
    else:
        question = body_text or leading

    collection = collect_options(cursor)

    remainder = find_answer_line(cursor)
    if remainder is None:
        # The answer scan ran to the end of the block
        resolved = ResolvedAnswer(Answer.empty())
        trailing = ""
    else:
        resolved = resolve_answer(remainder, collection.options)
        trailing = collect_explanation(cursor, start_rules)

    answer = resolved.answer
    if not answer.is_resolved and collection.marked_answer is not None:
        marked = collection.marked_answer
        answer = Answer(marked.label, marked.text)

    explanation = join_fragments([resolved.inline_explanation, trailing])

    return ParsedBlock(
        number=block.number,
        question=question,
        options=collection.options,
        answer=answer,
        explanation=explanation,
    )
