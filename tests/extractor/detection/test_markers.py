"""
Tests for extractor.detection.markers
"""
import pytest

from bayexam_toolkit.extractor.detection.markers import (
    Annotation,
    is_answer_key,
    is_answer_line,
    is_explanation_glyph,
    match_annotation,
    match_answer_line,
)


@pytest.mark.parametrize(
    "line, remainder",
    [
        ("Cevap: B", "B"),
        ("cevap:B", "B"),
        ("Doğru Cevap： C", "C"),
        ("Cevap B", "B"),
        ("**Cevap:** B", "** B"),
        ("Cevap:", ""),
        ("Answer: B", "B"),
        ("Correct answer: Blue", "Blue"),
    ],
)
def test_answer_lines(line, remainder):
    assert match_answer_line(line) == remainder


@pytest.mark.parametrize(
    "line",
    ["Answer the following", "Cevaplar: 1-A", "A) Cevap", "Açıklama: Cevap B"],
)
def test_not_answer_lines(line):
    assert match_answer_line(line) is None
    assert not is_answer_line(line)


class TestAnnotations:

    def test_explanation_annotation(self):
        assert match_annotation("Açıklama: Çünkü öyle") == Annotation(
            "explanation", "Açıklama", "Çünkü öyle"
        )

    def test_explanation_without_colon(self):
        assert match_annotation("**Açıklama** Kısa not").text == "Kısa not"

    def test_english_explanation(self):
        assert match_annotation("Explanation: because").kind == "explanation"

    def test_wrong_statement_annotation(self):
        assert match_annotation("Yanlış ifade: Dünya düzdür") == Annotation(
            "wrong_statement", "Yanlış ifade", "Dünya düzdür"
        )

    def test_bare_wrong_word_is_not_an_annotation(self):
        assert match_annotation("Yanlış olan hangisidir?") is None


def test_explanation_glyph():
    assert is_explanation_glyph("\U0001f7e6 Konu özeti")
    assert not is_explanation_glyph("Konu özeti")


@pytest.mark.parametrize("line, expected", [("1 - A", True), ("12-C", True), ("1 - a", False), ("A - 1", False)])
def test_answer_key(line, expected):
    assert is_answer_key(line) is expected
