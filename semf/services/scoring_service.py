"""Scoring service for the SEMF core skills test.

This service runs the complete scoring pipeline for one test attempt:
grading answers into raw counts, normalizing them onto the 0-50 scale,
leveling Reading & Writing and Listening with the grammar tie-break,
aggregating the overall level and assembling the report.
"""

from typing import Any, Mapping, Optional, Sequence

from semf.models.answer_key import DEFAULT_ANSWER_KEY, AnswerKey
from semf.models.scoring import (
    LEVEL_CUTOFF_TABLE,
    LevelBand,
    RawScores,
    SemfReport,
    SkillResult,
    TieBreakerSkillResult,
)
from semf.services.grading import AnswerGrader
from semf.services.leveling import apply_tie_breaker, determine_overall_level, normalize_score
from semf.services.report_builder import build_report
from semf.utils.constants import LEVELED_SKILLS, TIE_BREAKER_SKILL, ScoringConstants
from semf.utils.formatters import round_half_up
from semf.utils.logger import PerformanceLogger, get_scoring_logger

logger = get_scoring_logger()


class ScoringService:
    """Service for SEMF level scoring."""

    def __init__(
        self,
        answer_key: AnswerKey = DEFAULT_ANSWER_KEY,
        cutoffs: Sequence[LevelBand] = LEVEL_CUTOFF_TABLE,
    ):
        """Initialize scoring service.

        Args:
            answer_key: Expected answers (defaults to the current test form)
            cutoffs: Level bands in ascending order
        """
        self.grader = AnswerGrader(answer_key)
        self.cutoffs = tuple(cutoffs)

    def calculate_raw_scores(self, answers: Mapping[int, Any]) -> RawScores:
        """Grade an answer set into raw per-skill counts."""
        return self.grader.calculate_raw_scores(answers)

    def score(self, answers: Mapping[int, Any]) -> SemfReport:
        """Score a complete answer set.

        Missing or malformed answers earn no points; this never raises for
        any answer set.

        Args:
            answers: Question id (1-56) -> submitted answer text

        Returns:
            SemfReport: Levels, scores, descriptions and summary
        """
        with PerformanceLogger("semf_scoring", logger, {"answer_count": len(answers)}):
            raw_scores = self.calculate_raw_scores(answers)

            grammar_norm = normalize_score(
                raw_scores.for_skill(TIE_BREAKER_SKILL), TIE_BREAKER_SKILL.max_score
            )

            skill_results = []
            for skill in LEVELED_SKILLS:
                raw = raw_scores.for_skill(skill)
                normalized = normalize_score(raw, skill.max_score)
                tie_break = apply_tie_breaker(normalized, grammar_norm, self.cutoffs)
                skill_results.append(SkillResult(
                    skill=skill,
                    raw_score=raw,
                    max_score=skill.max_score,
                    normalized_score=self._display(normalized),
                    level=tie_break.level,
                    tie_breaker_applied=tie_break.tie_breaker_applied,
                ))

            tie_breaker_skill = TieBreakerSkillResult(
                skill=TIE_BREAKER_SKILL,
                raw_score=raw_scores.for_skill(TIE_BREAKER_SKILL),
                max_score=TIE_BREAKER_SKILL.max_score,
                normalized_score=self._display(grammar_norm),
            )

            overall_level = determine_overall_level(result.level for result in skill_results)

            report = build_report(
                skill_results, tie_breaker_skill, overall_level, raw_scores, answers
            )

        logger.info(
            "SEMF scoring completed",
            extra={
                "overall_level": overall_level.value,
                "raw_scores": raw_scores.model_dump(),
                "skill_levels": {r.skill.value: r.level.value for r in skill_results},
                "tie_breaks": {r.skill.value: r.tie_breaker_applied for r in skill_results},
                "completion_percentage": report.completion_percentage,
            }
        )

        return report

    @staticmethod
    def _display(score: float) -> float:
        return round_half_up(score, ScoringConstants.DISPLAY_DECIMALS)


_default_service: Optional[ScoringService] = None


def get_scoring_service() -> ScoringService:
    """Shared scoring service using the default answer key and cutoffs."""
    global _default_service
    if _default_service is None:
        _default_service = ScoringService()
    return _default_service


def calculate_semf_level(answers: Mapping[int, Any]) -> SemfReport:
    """Score an answer set with the default service."""
    return get_scoring_service().score(answers)
