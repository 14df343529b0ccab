"""Scoring models for the SEMF core skills test.

This module defines the values produced by the scoring pipeline: raw counts,
level bands, tie-break outcomes, per-skill results and the final report.
"""

from typing import Dict, List, Tuple

from pydantic import Field, model_validator

from semf.models.base import ValueModel
from semf.utils.constants import (
    LEVEL_CUTOFFS,
    LEVEL_DESCRIPTIONS,
    LEVEL_TITLES,
    SemfLevel,
    Skill,
)


class RawScores(ValueModel):
    """Correct-answer counts per skill."""

    grammar_vocabulary: int = Field(default=0, ge=0, le=20)
    reading_writing: int = Field(default=0, ge=0, le=24)
    listening: int = Field(default=0, ge=0, le=12)

    def for_skill(self, skill: Skill) -> int:
        """Get the raw count for a skill."""
        return {
            Skill.GRAMMAR_VOCABULARY: self.grammar_vocabulary,
            Skill.READING_WRITING: self.reading_writing,
            Skill.LISTENING: self.listening,
        }[skill]


class LevelBand(ValueModel):
    """Inclusive score range on the normalized scale that maps to a level."""

    level: SemfLevel
    min_score: int = Field(..., ge=0)
    max_score: int = Field(..., ge=0)

    @model_validator(mode="after")
    def validate_bounds(self) -> "LevelBand":
        """Ensure the band is not inverted."""
        if self.min_score > self.max_score:
            raise ValueError(
                f"Band {self.level.value} has min {self.min_score} above max {self.max_score}"
            )
        return self

    def contains(self, score: float) -> bool:
        """Whether the score falls inside this band (both ends inclusive)."""
        return self.min_score <= score <= self.max_score


def build_cutoff_table() -> Tuple[LevelBand, ...]:
    """Build the ordered S1-S5 band table from the level cutoffs."""
    return tuple(
        LevelBand(level=level, min_score=bounds[0], max_score=bounds[1])
        for level, bounds in LEVEL_CUTOFFS.items()
    )


LEVEL_CUTOFF_TABLE: Tuple[LevelBand, ...] = build_cutoff_table()


class TieBreakResult(ValueModel):
    """Outcome of the boundary tie-break for one skill."""

    base_level: SemfLevel
    level: SemfLevel
    tie_breaker_applied: bool = False


class SkillResult(ValueModel):
    """Leveled result for Reading & Writing or Listening."""

    skill: Skill
    raw_score: int = Field(..., ge=0)
    max_score: int = Field(..., gt=0)
    normalized_score: float = Field(..., description="Normalized 0-50 score rounded to one decimal")
    level: SemfLevel
    tie_breaker_applied: bool = False


class TieBreakerSkillResult(ValueModel):
    """Grammar & Vocabulary result; reported but never leveled."""

    skill: Skill = Skill.GRAMMAR_VOCABULARY
    raw_score: int = Field(..., ge=0)
    max_score: int = Field(..., gt=0)
    normalized_score: float


class SemfReport(ValueModel):
    """Complete scoring report for one test attempt."""

    skills: List[SkillResult]
    tie_breaker_skill: TieBreakerSkillResult
    overall_level: SemfLevel
    descriptions: Dict[SemfLevel, str]
    completion_percentage: int = Field(..., ge=0)
    summary: str

    def get_skill(self, skill: Skill) -> SkillResult:
        """Get the result for a leveled skill.

        Raises:
            KeyError: If the skill is not leveled in this report
        """
        for result in self.skills:
            if result.skill == skill:
                return result
        raise KeyError(skill)


class LevelGuideEntry(ValueModel):
    """Reference information for a single SEMF level."""

    level: SemfLevel
    title: str
    min_score: int
    max_score: int
    description: str

    @classmethod
    def from_band(cls, band: LevelBand) -> "LevelGuideEntry":
        """Build a guide entry from a cutoff band."""
        return cls(
            level=band.level,
            title=LEVEL_TITLES[band.level],
            min_score=band.min_score,
            max_score=band.max_score,
            description=LEVEL_DESCRIPTIONS[band.level],
        )
