"""
Integration tests for the extraction pipeline.

Test Coverage:
- extract_questions(): Multi-source runs, id assignment, skipped sources
- write_dataset(): Byte-identical output across runs
- load_document(): Newline normalization
"""
import itertools
import json
import logging

import pytest

from bayexam_toolkit.core.models import Answer, Option
from bayexam_toolkit.extractor import (
    ExtractionConfig,
    ExtractionError,
    extract_questions,
    write_dataset,
)
from bayexam_toolkit.extractor.pipeline import load_document
from bayexam_toolkit.extractor.timing import TimingLog


class TestExtractQuestions:
    """Tests for extract_questions()."""

    def test_sky_question_when_extracted_then_answer_resolved(self, write_source, sky_question_text):
        # Arrange
        path = write_source("1.txt", sky_question_text)

        # Act
        result = extract_questions([path])

        # Assert
        assert result.question_count == 1
        record = result.records[0]
        assert record.id == 1
        assert record.source == "1.txt"
        assert record.number == 1
        assert record.question == "What color is the sky?"
        assert record.options == (Option("A", "Red"), Option("B", "Blue"), Option("C", "Green"))
        assert record.answer == Answer("B", "Blue")

    def test_inline_marker_when_no_answer_line_then_marked_option(self, write_source):
        path = write_source("1.txt", "1) Başkent?\nA) Paris B) London* C) Berlin\n")

        record = extract_questions([path]).records[0]

        assert record.answer == Answer("B", "London")

    def test_inline_explanation_when_extracted_then_explanation_starts_with_it(self, write_source):
        path = write_source(
            "1.txt",
            "1) Soru?\nA) x\nB) y\nC) z\nCevap: C Açıklama: Çünkü öyle\nEk bilgi.\n",
        )

        record = extract_questions([path]).records[0]

        assert record.answer.label == "C"
        assert record.explanation.startswith("Çünkü öyle")

    def test_unknown_label_when_extracted_then_residual_text_kept(self, write_source):
        path = write_source("1.txt", "1) Q?\nA) x\nB) y\nCevap: E) Something\n")

        record = extract_questions([path]).records[0]

        assert record.answer == Answer("E", "Something")

    def test_blank_only_block_when_extracted_then_dropped(self, write_source):
        path = write_source("1.txt", "1)\n\n\n2) Q?\nCevap: Evet\n")

        result = extract_questions([path])

        assert [(r.id, r.number) for r in result.records] == [(1, 2)]

    def test_multiple_sources_when_extracted_then_ids_increase_across_files(self, write_source):
        first = write_source("1.txt", "1) A?\nCevap: a\n2) B?\nCevap: b\n")
        second = write_source("2.txt", "1) C?\nCevap: c\n")

        result = extract_questions([first, second])

        assert [(r.id, r.source, r.number) for r in result.records] == [
            (1, "1.txt", 1),
            (2, "1.txt", 2),
            (3, "2.txt", 1),
        ]
        assert result.sources_read == ["1.txt", "2.txt"]

    def test_missing_source_when_extracted_then_warned_and_skipped(self, write_source, tmp_path, caplog):
        first = write_source("1.txt", "1) A?\nCevap: a\n")
        missing = tmp_path / "2.txt"
        third = write_source("3.txt", "1) C?\nCevap: c\n")

        with caplog.at_level(logging.WARNING):
            result = extract_questions([first, missing, third])

        assert [r.id for r in result.records] == [1, 2]
        assert result.sources_skipped == [str(missing)]
        assert "Source not found" in caplog.text

    def test_undecodable_source_when_extracted_then_skipped(self, tmp_path):
        path = tmp_path / "1.txt"
        path.write_bytes(b"1) Q?\n\xff\xfe\nCevap: a\n")

        result = extract_questions([path])

        assert result.records == []
        assert len(result.warnings) == 1

    def test_strict_when_no_source_read_then_raises(self, tmp_path):
        with pytest.raises(ExtractionError):
            extract_questions([tmp_path / "missing.txt"], config=ExtractionConfig(strict=True))

    def test_injected_ids_when_extracted_then_used(self, write_source, sky_question_text):
        path = write_source("1.txt", sky_question_text)

        result = extract_questions([path], ids=itertools.count(100))

        assert result.records[0].id == 100

    def test_timing_log_when_given_then_records_source_phases(self, write_source, sky_question_text):
        path = write_source("1.txt", sky_question_text)
        timing_log = TimingLog()

        extract_questions([path], timing_log=timing_log)

        assert set(timing_log.source_timings["1.txt"]) == {"segmentation", "parsing"}


class TestWriteDataset:
    """Tests for write_dataset()."""

    def test_same_input_when_written_twice_then_bytes_identical(self, write_source, tmp_path):
        path = write_source("1.txt", "1) Soru?\nA) x\nB) y\nCevap: B\nAçıklama: çünkü\n")
        output = tmp_path / "out" / "questions.json"

        write_dataset(extract_questions([path]).records, output)
        first = output.read_bytes()
        write_dataset(extract_questions([path]).records, output)

        assert output.read_bytes() == first

    def test_written_dataset_when_loaded_then_matches_record_shape(self, write_source, sky_question_text, tmp_path):
        path = write_source("1.txt", sky_question_text)
        output = tmp_path / "questions.json"

        write_dataset(extract_questions([path]).records, output)
        data = json.loads(output.read_text(encoding="utf-8"))

        assert data == [{
            "id": 1,
            "source": "1.txt",
            "number": 1,
            "question": "What color is the sky?",
            "options": [
                {"label": "A", "text": "Red"},
                {"label": "B", "text": "Blue"},
                {"label": "C", "text": "Green"},
            ],
            "answer": {"label": "B", "text": "Blue"},
            "explanation": "",
        }]

    def test_shorter_dataset_when_overwritten_then_no_stale_tail(self, write_source, tmp_path):
        many = write_source("1.txt", "1) A?\nCevap: a\n2) B?\nCevap: b\n")
        few = write_source("2.txt", "1) C?\nCevap: c\n")
        output = tmp_path / "questions.json"

        write_dataset(extract_questions([many]).records, output)
        write_dataset(extract_questions([few]).records, output)

        assert len(json.loads(output.read_text(encoding="utf-8"))) == 1


def test_load_document_when_crlf_then_lines_normalized(tmp_path):
    path = tmp_path / "1.txt"
    path.write_bytes(b"1) Q?\r\nCevap: a\r\n")

    document = load_document(path)

    assert document.source == "1.txt"
    assert document.lines == ("1) Q?", "Cevap: a", "")
