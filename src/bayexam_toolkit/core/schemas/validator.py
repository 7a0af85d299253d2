"""
Schema Validation Utilities

Validates question datasets against the JSON schema shipped with the package.

Two layers of checks:
- jsonschema validation of the record shape (types, required keys)
- dataset-level invariants the schema cannot express: ids strictly
  increasing and therefore unique
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

import jsonschema

DATASET_SCHEMA_NAME = "questions"

# Compiled validators, built on first use
_VALIDATORS: dict[str, jsonschema.Draft202012Validator] = {}


def _get_validator(name: str) -> jsonschema.Draft202012Validator:
    """Return the compiled validator for `<name>.schema.json` next to this module."""
    validator = _VALIDATORS.get(name)
    if validator is None:
        schema_file = Path(__file__).with_name(f"{name}.schema.json")
        if not schema_file.is_file():
            raise FileNotFoundError(f"Missing schema file: {schema_file}")
        schema = json.loads(schema_file.read_text(encoding="utf-8"))
        jsonschema.Draft202012Validator.check_schema(schema)
        validator = _VALIDATORS[name] = jsonschema.Draft202012Validator(schema)
    return validator


class ValidationError(Exception):
    """
    Raised when a dataset does not match the schema.

    Attributes:
        path: Dotted location of the first problem, e.g. "3.answer.text"
        errors: Every schema message, in path order
    """

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = list(errors) if errors else []


def validate_dataset(data: Sequence[dict[str, Any]]) -> None:
    """
    Validate a serialized question dataset.

    Args:
        data: List of record dictionaries as written to questions.json

    Raises:
        ValidationError: If a record violates the schema or ids are not
            strictly increasing
    """
    validator = _get_validator(DATASET_SCHEMA_NAME)
    errors = sorted(validator.iter_errors(list(data)), key=lambda e: list(e.absolute_path))
    if errors:
        first = errors[0]
        raise ValidationError(
            f"Schema validation failed: {first.message}",
            path=".".join(str(p) for p in first.absolute_path),
            errors=[e.message for e in errors],
        )

    previous_id = 0
    for index, record in enumerate(data):
        if record["id"] <= previous_id:
            raise ValidationError(
                f"Record ids must be strictly increasing: {record['id']} after {previous_id}",
                path=f"{index}.id",
            )
        previous_id = record["id"]
