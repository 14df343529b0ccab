"""Unit tests for answer grading.

Covers each grading strategy and the aggregation of section scores into raw
per-skill counts.
"""

import pytest

from semf.models.scoring import RawScores
from semf.services.grading import (
    AnswerGrader,
    EssayHeuristicStrategy,
    ExactChoiceStrategy,
    KeywordHeuristicStrategy,
    OrderedSequenceStrategy,
    get_answer_text,
)
from semf.utils.constants import GradingMethod, Skill
from semf.utils.formatters import format_ordering_answer


def essay_of(word_count: int, signal: str = "benefit") -> str:
    return " ".join([signal] + ["word"] * (word_count - 1))


@pytest.fixture
def grader():
    return AnswerGrader()


class TestExactChoiceStrategy:
    """Single-letter grading."""

    @pytest.fixture
    def strategy(self):
        return ExactChoiceStrategy({1: "B"})

    def test_exact_letter_matches(self, strategy):
        assert strategy.is_correct(1, "B")

    def test_case_and_whitespace_ignored(self, strategy):
        assert strategy.is_correct(1, "  b \n")

    def test_wrong_letter(self, strategy):
        assert not strategy.is_correct(1, "C")

    def test_missing_answer_never_matches(self, strategy):
        assert not strategy.is_correct(1, None)
        assert not strategy.is_correct(1, "")

    def test_question_without_key_never_matches(self, strategy):
        assert not strategy.is_correct(99, "B")


class TestOrderedSequenceStrategy:
    """Sentence ordering requires the exact comma-space format."""

    @pytest.fixture
    def strategy(self):
        return OrderedSequenceStrategy({36: "B, C, D, A"})

    def test_exact_sequence_matches(self, strategy):
        assert strategy.is_correct(36, "B, C, D, A")

    def test_surrounding_whitespace_trimmed(self, strategy):
        assert strategy.is_correct(36, "  B, C, D, A  ")

    @pytest.mark.parametrize("answer", [
        "b, c, d, a",
        "B,C,D,A",
        "B, C, D,  A",
        "B; C; D; A",
        "C, B, D, A",
    ])
    def test_format_deviations_do_not_match(self, strategy, answer):
        assert not strategy.is_correct(36, answer)

    def test_serialized_ordering_matches(self, strategy):
        assert strategy.is_correct(36, format_ordering_answer(["B", "C", "D", "A"]))


class TestKeywordHeuristicStrategy:
    """Free-text answers need two keywords and twenty characters."""

    @pytest.fixture
    def strategy(self):
        return KeywordHeuristicStrategy({41: ("flexibility", "commute", "talent")})

    def test_two_keywords_and_long_enough(self, strategy):
        assert strategy.is_correct(41, "flexibility and commute")

    def test_keywords_case_insensitive(self, strategy):
        assert strategy.is_correct(41, "FLEXIBILITY and COMMUTE")

    def test_too_short_even_with_keywords(self, strategy):
        # 19 characters
        assert not strategy.is_correct(41, "flexibility commute")

    def test_single_keyword_not_enough(self, strategy):
        assert not strategy.is_correct(41, "I really value the flexibility it gives me")

    def test_keywords_matched_as_substrings(self, strategy):
        assert strategy.count_hits(41, "commuters value flexibilityish talents") == 3

    def test_missing_answer(self, strategy):
        assert not strategy.is_correct(41, None)
        assert strategy.count_hits(41, None) == 0


class TestEssayHeuristicStrategy:
    """Essay needs 80-200 words and an argument signal."""

    @pytest.fixture
    def strategy(self):
        return EssayHeuristicStrategy(("advantage", "disadvantage", "benefit", "challenge"))

    @pytest.mark.parametrize("word_count,expected", [
        (79, False),
        (80, True),
        (150, True),
        (200, True),
        (201, False),
    ])
    def test_word_count_window(self, strategy, word_count, expected):
        assert strategy.is_correct(44, essay_of(word_count)) is expected

    def test_requires_argument_signal(self, strategy):
        assert not strategy.is_correct(44, " ".join(["word"] * 100))

    def test_signal_case_insensitive(self, strategy):
        assert strategy.is_correct(44, essay_of(100, signal="Advantage"))

    def test_blank_essay_counts_zero_words(self, strategy):
        assert strategy.count_words("   \n\t ") == 0
        assert strategy.count_words(None) == 0
        assert not strategy.is_correct(44, "   ")

    def test_words_split_on_any_whitespace(self, strategy):
        assert strategy.count_words("one\ttwo\n\nthree   four") == 4


class TestGetAnswerText:
    """Answer lookup tolerates missing and non-string values."""

    def test_missing(self):
        assert get_answer_text({}, 1) is None

    def test_none_value(self):
        assert get_answer_text({1: None}, 1) is None

    def test_non_string_is_stringified(self):
        assert get_answer_text({1: 3}, 1) == "3"


class TestAnswerGrader:
    """Raw score aggregation over the fixed question ranges."""

    def test_all_correct(self, grader, all_correct_answers):
        assert grader.calculate_raw_scores(all_correct_answers) == RawScores(
            grammar_vocabulary=20, reading_writing=24, listening=12
        )

    def test_empty_answer_set(self, grader):
        assert grader.calculate_raw_scores({}) == RawScores(
            grammar_vocabulary=0, reading_writing=0, listening=0
        )

    def test_partial_answers(self, grader, answer_factory):
        answers = answer_factory(grammar=5, story=3, ordering=2, text=1, listening=4)
        raw = grader.calculate_raw_scores(answers)

        assert raw.grammar_vocabulary == 5
        assert raw.reading_writing == 6
        assert raw.listening == 4

    def test_question_36_strict_format(self, grader):
        assert grader.calculate_raw_scores({36: "B, C, D, A"}).reading_writing == 1
        assert grader.calculate_raw_scores({36: "b, c, d, a"}).reading_writing == 0
        assert grader.calculate_raw_scores({36: "B,C,D,A"}).reading_writing == 0

    def test_essay_point_counts_towards_reading_writing(self, grader, essay_text):
        assert grader.calculate_raw_scores({44: essay_text}).reading_writing == 1

    def test_malformed_answers_never_raise(self, grader):
        answers = {1: None, 2: 42, 36: ["B", "C"], 41: "", 44: 3.5, 99: "B", -1: "A"}
        assert grader.calculate_raw_scores(answers) == RawScores()

    def test_answers_are_not_mutated(self, grader, all_correct_answers):
        snapshot = dict(all_correct_answers)
        grader.calculate_raw_scores(all_correct_answers)
        assert all_correct_answers == snapshot

    def test_section_breakdown(self, grader, all_correct_answers):
        sections = grader.grade_sections(all_correct_answers)

        assert [s.section for s in sections] == [
            "grammar_vocabulary",
            "story_continuation",
            "sentence_ordering",
            "reading_text",
            "essay",
            "listening",
        ]
        assert [s.max_score for s in sections] == [20, 15, 5, 3, 1, 12]
        assert all(s.score == s.max_score for s in sections)
        assert sections[2].method == GradingMethod.ORDERED_SEQUENCE
        assert sections[4].skill == Skill.READING_WRITING
