"""Unit tests for report assembly helpers."""

import pytest

from semf.models.scoring import RawScores
from semf.services.report_builder import (
    build_level_descriptions,
    build_summary,
    calculate_completion_rate,
    count_answered,
    get_level_guide,
    get_recommendation,
)
from semf.utils.constants import (
    DEFAULT_RECOMMENDATION,
    LEVEL_DESCRIPTIONS,
    LEVEL_RECOMMENDATIONS,
    SemfLevel,
)


class TestLevelDescriptions:

    def test_distinct_levels_only(self):
        descriptions = build_level_descriptions([SemfLevel.S2, SemfLevel.S5, SemfLevel.S2])

        assert list(descriptions) == [SemfLevel.S2, SemfLevel.S5]
        assert descriptions[SemfLevel.S5] == LEVEL_DESCRIPTIONS[SemfLevel.S5]


class TestCompletion:

    def test_counts_present_entries(self):
        answers = {1: "A", 2: "", 3: None, 44: "essay"}

        assert count_answered(answers) == 3
        assert calculate_completion_rate(answers) == pytest.approx(3 / 56 * 100)

    def test_empty(self):
        assert calculate_completion_rate({}) == 0

    def test_ids_outside_the_test_ignored(self):
        answers = {question_id: "x" for question_id in range(1, 120)}

        assert count_answered(answers) == 56
        assert calculate_completion_rate(answers) == 100

    def test_non_integer_keys_ignored(self):
        assert count_answered({"1": "B", 2: "C"}) == 1


class TestRecommendation:

    @pytest.mark.parametrize("level", list(SemfLevel))
    def test_known_levels(self, level):
        assert get_recommendation(level) == LEVEL_RECOMMENDATIONS[level]

    def test_level_code_string(self):
        assert get_recommendation("S3") == LEVEL_RECOMMENDATIONS[SemfLevel.S3]

    def test_unrecognized_level_falls_back(self):
        assert get_recommendation("S9") == DEFAULT_RECOMMENDATION


class TestBuildSummary:

    def test_summary_layout(self):
        raw = RawScores(grammar_vocabulary=14, reading_writing=7, listening=12)
        summary = build_summary(SemfLevel.S2, raw, 33 / 56 * 100)

        assert summary == "\n".join([
            "Overall SEMF Level: S2",
            "",
            "Performance Breakdown:",
            "• Grammar & Vocabulary: 14/20 (70%)",
            "• Reading & Writing: 7/24 (29%)",
            "• Listening: 12/12 (100%)",
            "• Test Completion: 59%",
            "",
            LEVEL_RECOMMENDATIONS[SemfLevel.S2],
        ])

    def test_percentages_round_half_up(self):
        raw = RawScores(grammar_vocabulary=0, reading_writing=3, listening=0)
        summary = build_summary(SemfLevel.S1, raw, 0)

        # 3/24 = 12.5%
        assert "• Reading & Writing: 3/24 (13%)" in summary

    def test_unrecognized_level_uses_generic_message(self):
        summary = build_summary("S9", RawScores(), 0)

        assert summary.startswith("Overall SEMF Level: S9")
        assert summary.endswith(DEFAULT_RECOMMENDATION)


class TestLevelGuide:

    def test_all_levels_in_order(self):
        guide = get_level_guide()

        assert [entry.level for entry in guide] == list(SemfLevel)

    def test_entry_content(self):
        independent = get_level_guide()[2]

        assert independent.title == "Independent User"
        assert (independent.min_score, independent.max_score) == (26, 33)
        assert independent.description == LEVEL_DESCRIPTIONS[SemfLevel.S3]
