"""
Module: questions

Purpose:
    Provides the Option, Answer and QuestionRecord dataclasses - the output
    unit of the extractor and the structure the quiz front-end loads.

Key Functions:
    - Answer.empty(): The "nothing resolved" answer
    - Answer.is_resolved: True when a label or a text is present
    - QuestionRecord.is_emittable: Filter invariant for output records
    - QuestionRecord.to_dict() / QuestionRecord.from_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - extractor.structuring.block_parser
    - extractor.pipeline
    - core.utils.serialization

Design Notes:
    The JSON form of a missing answer label is "" rather than null; the
    front-end tests labels for truthiness when grading a choice.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class Option:
    """
    One labeled multiple-choice option.

    Attributes:
        label: Single uppercase letter, e.g. "A"
        text: Option text with any correct-answer marker removed

    Invariants:
        - label is exactly one character
    """

    label: str
    text: str

    def __post_init__(self) -> None:
        if len(self.label) != 1:
            raise ValueError(f"Option label must be a single letter: {self.label!r}")

    def to_dict(self) -> dict[str, str]:
        return {"label": self.label, "text": self.text}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Option:
        return cls(label=str(data["label"]), text=str(data.get("text", "")))


@dataclass(frozen=True, slots=True)
class Answer:
    """
    Resolved answer of a question.

    Attributes:
        label: Option label the answer refers to, if any
        text: Answer text (free text or the referenced option's text)
    """

    label: Optional[str] = None
    text: str = ""

    @classmethod
    def empty(cls) -> Answer:
        return cls()

    @property
    def is_resolved(self) -> bool:
        """True if either a label or a text was resolved."""
        return bool(self.label) or bool(self.text)

    def to_dict(self) -> dict[str, str]:
        return {"label": self.label or "", "text": self.text}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Answer:
        return cls(label=data.get("label") or None, text=str(data.get("text", "")))


@dataclass(frozen=True)
class QuestionRecord:
    """
    Question record written to the output dataset (immutable).

    Attributes:
        id: Sequential identifier, unique across every source of one run
        source: Label of the originating file
        number: Declared ordinal of the question, 0 if absent
        question: Prompt text
        options: Options in source order (may be empty)
        answer: Resolved answer
        explanation: Explanation text (may be empty)

    Invariants:
        - Records written by the extractor have a non-empty question and
          a non-empty answer text (see ``is_emittable``)

    Example:
        >>> record = QuestionRecord(
        ...     id=1, source="1.txt", number=4, question="Başkent?",
        ...     options=(Option("A", "Ankara"),), answer=Answer("A", "Ankara"),
        ... )
        >>> record.to_dict()["answer"]
        {'label': 'A', 'text': 'Ankara'}
    """

    id: int
    source: str
    number: int
    question: str
    options: tuple[Option, ...] = ()
    answer: Answer = Answer()
    explanation: str = ""

    @property
    def is_emittable(self) -> bool:
        """True if the record satisfies the output filter invariant."""
        return bool(self.question) and bool(self.answer.text)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to a JSON-ready dictionary.

        Key order is fixed so repeated runs produce identical bytes.
        """
        return {
            "id": self.id,
            "source": self.source,
            "number": self.number,
            "question": self.question,
            "options": [option.to_dict() for option in self.options],
            "answer": self.answer.to_dict(),
            "explanation": self.explanation,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuestionRecord:
        return cls(
            id=int(data["id"]),
            source=str(data["source"]),
            number=int(data.get("number", 0)),
            question=str(data["question"]),
            options=tuple(Option.from_dict(o) for o in data.get("options", [])),
            answer=Answer.from_dict(data.get("answer", {})),
            explanation=str(data.get("explanation", "")),
        )
