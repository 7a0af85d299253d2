"""
Module: extractor.detection.answers

Purpose:
    Answer resolution - interprets the remainder of an answer line as a
    label reference ("C", "C)", "E) Something") or as a free-text answer,
    and splits off an inline explanation segment.

Key Functions:
    - split_inline_explanation(): Separate "... Açıklama: ..." tail
    - resolve_answer(): Turn an answer-line remainder into an Answer

Key Classes:
    - ResolvedAnswer: Answer plus the inline explanation fragment

Used By:
    - extractor.structuring.collectors: Answer/explanation stage
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Sequence

from bayexam_toolkit.core.models import Answer, Option

from .markers import INLINE_EXPLANATION
from .text import LETTERS, join_fragments, remove_emphasis

# Single letter, then either explicit punctuation (and optional residual
# text) or the end of the string. "B Blue" is free text, not a label.
LABEL_REFERENCE = re.compile(
    rf"^(?P<label>[{LETTERS}])(?:\s*(?P<punct>[.):\-])\s*(?P<rest>.*))?$"
)


@dataclass(frozen=True)
class ResolvedAnswer:
    """
    Result of interpreting an answer line.

    Attributes:
        answer: Resolved answer (may be empty)
        inline_explanation: Text that followed an inline explanation keyword
    """
    answer: Answer
    inline_explanation: str = ""


def split_inline_explanation(text: str) -> tuple[str, str]:
    """
    Split an answer remainder at the first inline explanation keyword.

    Returns:
        (answer_text, explanation_text), both trimmed

    Example:
        >>> split_inline_explanation("C Açıklama: Çünkü öyle")
        ('C', 'Çünkü öyle')
    """
    pieces = INLINE_EXPLANATION.split(text)
    if len(pieces) == 1:
        return text.strip(), ""
    return pieces[0].strip(), join_fragments(p.strip() for p in pieces[1:])


def options_by_label(options: Sequence[Option]) -> Dict[str, Option]:
    """Map labels to options; a repeated label keeps the last option."""
    return {option.label: option for option in options}


def resolve_answer(remainder: str, options: Sequence[Option]) -> ResolvedAnswer:
    """
    Resolve the text after an answer keyword.

    The remainder is treated as a label reference when its leading letter
    names a known option or is followed by explicit punctuation. The
    answer text is then the residual text, falling back to the referenced
    option's text. Anything else is a free-text answer without label.
    Labels are not cross-checked against the options list.

    Args:
        remainder: Text after "Cevap:" / "Answer:"
        options: Options collected for the block

    Returns:
        ResolvedAnswer; its answer is empty if nothing was left

    Example:
        >>> resolve_answer("B", [Option("A", "Red"), Option("B", "Blue")]).answer
        Answer(label='B', text='Blue')
    """
    cleaned, inline_explanation = split_inline_explanation(remove_emphasis(remainder))

    match = LABEL_REFERENCE.match(cleaned)
    if match:
        label = match.group("label").upper()
        option = options_by_label(options).get(label)
        if option is not None or match.group("punct"):
            residual = (match.group("rest") or "").strip()
            text = residual or (option.text if option is not None else "")
            return ResolvedAnswer(Answer(label, text), inline_explanation)

    return ResolvedAnswer(Answer(None, cleaned), inline_explanation)
