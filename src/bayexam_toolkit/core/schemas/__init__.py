"""
Schemas Package

JSON schema definition and validation of the question dataset.
"""

from .validator import DATASET_SCHEMA_NAME, ValidationError, validate_dataset

__all__ = [
    "DATASET_SCHEMA_NAME",
    "ValidationError",
    "validate_dataset",
]
