"""Report assembly for SEMF results.

Builds the level descriptions, completion figure and narrative summary that
accompany the computed levels.
"""

from typing import Any, Dict, Iterable, List, Mapping, Sequence, Union

from semf.models.scoring import (
    LEVEL_CUTOFF_TABLE,
    LevelBand,
    LevelGuideEntry,
    RawScores,
    SemfReport,
    SkillResult,
    TieBreakerSkillResult,
)
from semf.utils.constants import (
    DEFAULT_RECOMMENDATION,
    LEVEL_DESCRIPTIONS,
    LEVEL_RECOMMENDATIONS,
    QuestionConstants,
    SemfLevel,
    Skill,
)
from semf.utils.formatters import format_percentage, round_half_up


def build_level_descriptions(levels: Iterable[SemfLevel]) -> Dict[SemfLevel, str]:
    """Descriptions for each distinct level, keyed in first-seen order."""
    descriptions: Dict[SemfLevel, str] = {}
    for level in levels:
        if level not in descriptions:
            descriptions[level] = LEVEL_DESCRIPTIONS[level]
    return descriptions


def count_answered(answers: Mapping[int, Any]) -> int:
    """Number of test questions with a submitted entry, blank text included.

    Keys that are not question ids of the test (out of range, or not integers)
    are ignored, the same way grading ignores them.
    """
    question_ids = range(QuestionConstants.FIRST_QUESTION, QuestionConstants.LAST_QUESTION + 1)
    return sum(
        1 for question_id, value in answers.items()
        if isinstance(question_id, int) and question_id in question_ids and value is not None
    )


def calculate_completion_rate(
    answers: Mapping[int, Any],
    total_questions: int = QuestionConstants.TOTAL_QUESTIONS
) -> float:
    """Percentage of the test's questions present in the answer set."""
    return count_answered(answers) / total_questions * 100


def get_recommendation(level: Union[SemfLevel, str]) -> str:
    """Canned study recommendation for a level; generic text if unrecognized."""
    try:
        return LEVEL_RECOMMENDATIONS[SemfLevel(level)]
    except ValueError:
        return DEFAULT_RECOMMENDATION


def build_summary(
    overall_level: Union[SemfLevel, str],
    raw_scores: RawScores,
    completion_rate: float
) -> str:
    """Narrative feedback: headline level, score breakdown and recommendation.

    Args:
        overall_level: Overall SEMF level
        raw_scores: Raw counts per skill
        completion_rate: Percentage of questions answered

    Returns:
        str: Multi-line summary text
    """
    level_label = overall_level.value if isinstance(overall_level, SemfLevel) else overall_level

    lines = [f"Overall SEMF Level: {level_label}", "", "Performance Breakdown:"]
    for skill in Skill:
        raw = raw_scores.for_skill(skill)
        lines.append(
            f"• {skill.display_name}: {raw}/{skill.max_score} "
            f"({format_percentage(raw, skill.max_score)}%)"
        )
    lines.append(f"• Test Completion: {int(round_half_up(completion_rate))}%")
    lines.append("")
    lines.append(get_recommendation(overall_level))

    return "\n".join(lines)


def build_report(
    skills: Sequence[SkillResult],
    tie_breaker_skill: TieBreakerSkillResult,
    overall_level: SemfLevel,
    raw_scores: RawScores,
    answers: Mapping[int, Any],
) -> SemfReport:
    """Assemble the final report value.

    Args:
        skills: Leveled skill results, in report order
        tie_breaker_skill: Grammar & Vocabulary result
        overall_level: Aggregated level
        raw_scores: Raw counts used for the breakdown
        answers: Original answer set, for the completion figure

    Returns:
        SemfReport: Immutable report
    """
    completion_rate = calculate_completion_rate(answers)
    levels_present = [result.level for result in skills] + [overall_level]

    return SemfReport(
        skills=list(skills),
        tie_breaker_skill=tie_breaker_skill,
        overall_level=overall_level,
        descriptions=build_level_descriptions(levels_present),
        completion_percentage=int(round_half_up(completion_rate)),
        summary=build_summary(overall_level, raw_scores, completion_rate),
    )


def get_level_guide(cutoffs: Sequence[LevelBand] = LEVEL_CUTOFF_TABLE) -> List[LevelGuideEntry]:
    """Title, point range and description for every level, lowest first."""
    return [LevelGuideEntry.from_band(band) for band in cutoffs]
