"""
Unit Tests for Serialization Utilities
"""

import json
from pathlib import Path

import pytest

from bayexam_toolkit.core.models import Answer, Option, QuestionRecord
from bayexam_toolkit.core.schemas import ValidationError
from bayexam_toolkit.core.utils import (
    dumps_dataset,
    load_dataset,
    records_from_payload,
    records_to_payload,
)


@pytest.fixture
def records() -> list[QuestionRecord]:
    return [
        QuestionRecord(1, "1.txt", 1, "Başkent?", (Option("A", "Ankara"),), Answer("A", "Ankara")),
        QuestionRecord(2, "1.txt", 2, "Işık hızı?", (), Answer(None, "c"), "Sabit."),
    ]


class TestDumpsDataset:
    """Tests for dumps_dataset()."""

    def test_dumps_when_non_ascii_then_kept_verbatim(self, records):
        text = dumps_dataset(records)
        assert "Başkent?" in text
        assert "\\u" not in text

    def test_dumps_when_called_then_trailing_newline_and_indent(self, records):
        text = dumps_dataset(records)
        assert text.endswith("]\n")
        assert text.startswith('[\n  {\n    "id": 1,')

    def test_dumps_when_called_twice_then_identical(self, records):
        assert dumps_dataset(records) == dumps_dataset(list(records))

    def test_dumps_when_invalid_record_then_raises(self):
        bad = [QuestionRecord(1, "1.txt", 1, "Q?", (), Answer("A", ""))]
        with pytest.raises(ValidationError):
            dumps_dataset(bad)

    def test_dumps_when_validation_disabled_then_renders(self):
        bad = [QuestionRecord(1, "1.txt", 1, "Q?", (), Answer("A", ""))]
        assert json.loads(dumps_dataset(bad, validate=False))[0]["answer"] == {"label": "A", "text": ""}


class TestLoadDataset:
    """Tests for load_dataset() and payload conversion."""

    def test_load_when_written_then_records_restored(self, records, tmp_path: Path):
        path = tmp_path / "questions.json"
        path.write_text(dumps_dataset(records), encoding="utf-8")

        assert load_dataset(path) == records

    def test_load_when_not_a_list_then_raises(self, tmp_path: Path):
        path = tmp_path / "questions.json"
        path.write_text('{"id": 1}', encoding="utf-8")

        with pytest.raises(ValidationError, match="JSON array"):
            load_dataset(path)

    def test_load_when_invalid_json_then_raises(self, tmp_path: Path):
        path = tmp_path / "questions.json"
        path.write_text("[", encoding="utf-8")

        with pytest.raises(ValidationError, match="Invalid JSON"):
            load_dataset(path)

    def test_payload_roundtrip_when_valid_then_equal(self, records):
        assert records_from_payload(records_to_payload(records)) == records
