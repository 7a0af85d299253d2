"""
Utils Package

Serialization functions for the question dataset.
"""

from .serialization import (
    dumps_dataset,
    load_dataset,
    records_from_payload,
    records_to_payload,
)

__all__ = [
    "dumps_dataset",
    "load_dataset",
    "records_from_payload",
    "records_to_payload",
]
