"""
Core Models Package

Immutable data models shared by the extractor stages and the dataset writer.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation while a block moves through the parse stages
2. Records can be compared directly in tests
3. Easier to reason about data flow

| Type | Lifetime |
|------|----------|
| `RawDocument` | One source file, discarded after segmentation |
| `Block` | One question span, discarded after parsing |
| `QuestionRecord` | Output unit, persisted in the dataset |
"""

from .documents import Block, RawDocument, normalize_newlines
from .questions import Answer, Option, QuestionRecord

__all__ = [
    "Answer",
    "Block",
    "Option",
    "QuestionRecord",
    "RawDocument",
    "normalize_newlines",
]
