"""
Module: extractor

Purpose:
    Text extraction pipeline for turning plain-text exam dumps into the
    question dataset loaded by the quiz front-end.

Key Functions:
    - extract_questions(): Main entry point for extraction
    - write_dataset(): Write records as questions.json

Key Classes:
    - ExtractionConfig: Configuration for extraction settings
    - ExtractionResult: Container for extraction output

Used By:
    - bayexam_toolkit.cli: Command-line extraction
"""

from .config import ExtractionConfig
from .pipeline import (
    ExtractionError,
    ExtractionResult,
    extract_document,
    extract_questions,
    load_document,
    write_dataset,
)

__all__ = [
    "ExtractionConfig",
    "ExtractionError",
    "ExtractionResult",
    "extract_document",
    "extract_questions",
    "load_document",
    "write_dataset",
]
