"""
Serialization Utilities

Provides to/from JSON utilities for the question dataset.

- ``records_to_payload`` / ``records_from_payload`` convert between model
  objects and JSON-ready lists
- ``dumps_dataset`` renders the exact bytes written to disk; output is
  deterministic (fixed key order, no timestamps) so re-running the extractor
  on unchanged input yields an identical file
- ``load_dataset`` reads a dataset back, validating it first
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ..models.questions import QuestionRecord
from ..schemas.validator import ValidationError, validate_dataset


def records_to_payload(records: Iterable[QuestionRecord]) -> list[dict[str, Any]]:
    """Serialize records to a list of dictionaries in emission order."""
    return [record.to_dict() for record in records]


def records_from_payload(
    data: list[dict[str, Any]],
    *,
    validate: bool = True,
) -> list[QuestionRecord]:
    """
    Deserialize records from a list of dictionaries.

    Args:
        data: Parsed JSON array
        validate: Whether to validate against the dataset schema first

    Returns:
        QuestionRecord list in file order

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_dataset(data)
    return [QuestionRecord.from_dict(item) for item in data]


def dumps_dataset(records: Iterable[QuestionRecord], *, validate: bool = True) -> str:
    """
    Render records as the dataset JSON document.

    Args:
        records: Records in emission order
        validate: Validate the payload before rendering

    Returns:
        JSON text with 2-space indent, non-ASCII kept as-is, trailing newline
    """
    payload = records_to_payload(records)
    if validate:
        validate_dataset(payload)
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def load_dataset(path: Path, *, validate: bool = True) -> list[QuestionRecord]:
    """
    Load a dataset written by the extractor.

    Raises:
        FileNotFoundError: If path doesn't exist
        ValidationError: If the file is not a JSON array or fails validation
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, list):
        raise ValidationError(f"Dataset must be a JSON array: {path}")
    return records_from_payload(data, validate=validate)
