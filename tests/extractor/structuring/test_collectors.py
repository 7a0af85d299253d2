"""
Tests for extractor.structuring.collectors

Test Coverage:
- collect_question_text(): Multi-line prompts, terminators
- collect_options(): Blank lines, duplicate labels, marked answer
- find_answer_line(): Answer line after unrelated lines
- collect_explanation(): Annotations, relabeling, terminators
"""
from bayexam_toolkit.core.models import Option
from bayexam_toolkit.extractor.cursor import LineCursor
from bayexam_toolkit.extractor.detection.starts import select_rules
from bayexam_toolkit.extractor.structuring.collectors import (
    OptionCollection,
    collect_explanation,
    collect_options,
    collect_question_text,
    find_answer_line,
    is_question_terminator,
)


class TestCollectQuestionText:

    def test_joins_lines_until_first_option(self):
        cursor = LineCursor(["**Aşağıdakilerden hangisi**", "", "doğrudur?", "A) x"])

        assert collect_question_text(cursor) == "Aşağıdakilerden hangisi doğrudur?"
        assert cursor.peek() == "A) x"

    def test_stops_at_answer_line(self):
        cursor = LineCursor(["Cevap: Evet"])

        assert collect_question_text(cursor) == ""
        assert cursor.position == 0

    def test_terminators(self):
        assert is_question_terminator("B) y")
        assert is_question_terminator("Answer: B")
        assert is_question_terminator("Yanlış ifade: z")
        assert is_question_terminator("\U0001f7e6 Konu")
        assert not is_question_terminator("Hangisi doğrudur?")


class TestCollectOptions:

    def test_options_across_blank_lines(self):
        cursor = LineCursor(["A) x", "", "B) y", "Cevap: B"])

        collection = collect_options(cursor)

        assert collection == OptionCollection((Option("A", "x"), Option("B", "y")), None)
        assert cursor.peek() == "Cevap: B"

    def test_repeated_label_replaces_text_in_place(self):
        cursor = LineCursor(["A) x", "B) y", "A) z"])

        collection = collect_options(cursor)

        assert collection.options == (Option("A", "z"), Option("B", "y"))

    def test_first_marked_option_wins(self):
        cursor = LineCursor(["A) x*", "B) y ++"])

        assert collect_options(cursor).marked_answer == Option("A", "x")

    def test_no_options(self):
        cursor = LineCursor(["Cevap: Evet"])

        assert collect_options(cursor) == OptionCollection()
        assert cursor.position == 0


class TestFindAnswerLine:

    def test_skips_lines_before_answer(self):
        cursor = LineCursor(["Not: ipucu", "Cevap: B", "Açıklama: x"])

        assert find_answer_line(cursor) == "B"
        assert cursor.peek() == "Açıklama: x"

    def test_missing_answer_leaves_cursor(self):
        cursor = LineCursor(["Açıklama: x"])

        assert find_answer_line(cursor) is None
        assert cursor.position == 0


class TestCollectExplanation:

    def test_annotations_are_stripped_and_relabeled(self):
        cursor = LineCursor([
            "Açıklama: Çünkü x.",
            "Yanlış  ifade: y doğru değil",
            "Diğer satır",
            "\U0001f7e6 Konu özeti",
            "Sonraki metin",
        ])

        explanation = collect_explanation(cursor)

        assert explanation == "Çünkü x. Yanlış ifade: y doğru değil Diğer satır"
        assert cursor.peek() == "\U0001f7e6 Konu özeti"

    def test_wrong_statement_label_is_canonical(self):
        cursor = LineCursor(["yanlış ifade: z", "Wrong statement: w"])

        assert collect_explanation(cursor) == "Yanlış ifade: z Yanlış ifade: w"

    def test_keyword_without_text_is_dropped(self):
        assert collect_explanation(LineCursor(["Açıklama", "metin"])) == "metin"

    def test_stops_at_answer_key(self):
        assert collect_explanation(LineCursor(["Açıklama: a", "1 - A", "2 - B"])) == "a"

    def test_stops_at_question_start(self):
        assert collect_explanation(LineCursor(["Açıklama: a", "2) Sonraki?", "b"])) == "a"

    def test_bullet_line_continues_when_bullet_rule_disabled(self):
        cursor = LineCursor(["Açıklama: a", "• Madde bir"])

        assert collect_explanation(cursor) == "a"
        assert collect_explanation(
            LineCursor(["Açıklama: a", "• Madde bir"]),
            select_rules(("numbered", "soru")),
        ) == "a • Madde bir"
