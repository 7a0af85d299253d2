"""
Module: documents

Purpose:
    Provides the RawDocument and Block dataclasses - the transient inputs of
    a parse pass. A RawDocument is one source file split into lines; a Block
    is the span of lines belonging to a single question.

Key Functions:
    - normalize_newlines(): Fold every line-ending convention into "\\n"
    - RawDocument.from_text(): Build a document from decoded file content

Dependencies:
    - dataclasses (std)
    - re (std)

Used By:
    - extractor.pipeline: Loads sources into RawDocument
    - extractor.structuring.segmenter: Produces Block sequences
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# CRLF, lone CR, NEL (U+0085), LINE SEPARATOR (U+2028), PARAGRAPH SEPARATOR (U+2029)
_NEWLINE_PATTERN = re.compile(r"\r\n|[\r\u0085\u2028\u2029]")
_BOM = "\ufeff"


def normalize_newlines(text: str) -> str:
    """
    Normalize line endings and isolated separator code points to "\\n".

    Args:
        text: Decoded file content

    Returns:
        Text using "\\n" as the only line separator, without a leading BOM

    Example:
        >>> normalize_newlines("a\\r\\nb\\u2028c")
        'a\\nb\\nc'
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    return _NEWLINE_PATTERN.sub("\n", text)


@dataclass(frozen=True)
class RawDocument:
    """
    One input source as an ordered, immutable sequence of lines.

    Attributes:
        source: Label identifying the source (usually the file name)
        lines: Lines of the document, newline characters removed
    """

    source: str
    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, source: str, text: str) -> RawDocument:
        """Split normalized text into a document."""
        return cls(source=source, lines=tuple(normalize_newlines(text).split("\n")))

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class Block:
    """
    Contiguous run of lines belonging to one question.

    Attributes:
        number: Declared ordinal of the question (position for unnumbered starts)
        leading_text: Text salvaged from the start-of-block marker line
        body: Lines following the marker line, verbatim
    """

    number: int
    leading_text: str
    body: tuple[str, ...] = ()
