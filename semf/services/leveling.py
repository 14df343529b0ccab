"""Normalization, level mapping and tie-break adjustment.

Raw counts are rescaled onto a common 0-50 scale and classified against the
S1-S5 cutoff bands. Scores sitting just outside a band boundary can then be
nudged using the Grammar & Vocabulary score as the deciding signal.
"""

from typing import Iterable, Sequence

from semf.models.scoring import LEVEL_CUTOFF_TABLE, LevelBand, TieBreakResult
from semf.utils.constants import ScoringConstants, SemfLevel
from semf.utils.logger import get_scoring_logger

logger = get_scoring_logger()


def normalize_score(
    raw_score: float,
    max_score: float,
    scale: float = ScoringConstants.NORMALIZED_SCALE_MAX
) -> float:
    """Rescale a raw count onto the 0-50 scale at full precision.

    Args:
        raw_score: Correct-answer count
        max_score: Maximum possible count for the skill
        scale: Top of the normalized scale

    Returns:
        float: Normalized score
    """
    return (raw_score / max_score) * scale


def map_to_level(
    score: float,
    cutoffs: Sequence[LevelBand] = LEVEL_CUTOFF_TABLE
) -> SemfLevel:
    """Classify a normalized score into the first band that contains it.

    Scores outside every band (negative, above 50, or inside the gaps between
    integer bounds) fall back to the lowest level. Two thirds of a skill's
    maximum normalizes to 33.33, between S3 and S4, and takes this path;
    the tie-break then decides its final level.

    Args:
        score: Unrounded normalized score
        cutoffs: Bands in ascending order

    Returns:
        SemfLevel: Matching level
    """
    for band in cutoffs:
        if band.contains(score):
            return band.level

    logger.warning(
        "Normalized score outside all level bands, using fallback level",
        extra={"score": score, "fallback_level": ScoringConstants.FALLBACK_LEVEL.value}
    )
    return ScoringConstants.FALLBACK_LEVEL


def apply_tie_breaker(
    score: float,
    grammar_score: float,
    cutoffs: Sequence[LevelBand] = LEVEL_CUTOFF_TABLE,
    margin: float = ScoringConstants.TIE_BREAK_MARGIN,
    threshold: float = ScoringConstants.TIE_BREAK_GRAMMAR_THRESHOLD,
) -> TieBreakResult:
    """Adjust a skill level when its score sits just outside a band boundary.

    Every band is checked in ascending order and the last matching window
    decides the outcome:

    * up: ``band.min - margin <= score < band.min`` with a strong grammar
      score (``>= threshold``) promotes to that band;
    * down: ``band.max < score <= band.max + margin`` with a weak grammar
      score (``< threshold``) demotes to the band one position below that
      band. The lowest band has nothing below it, so it never demotes.

    Args:
        score: Unrounded normalized score of the skill
        grammar_score: Unrounded normalized Grammar & Vocabulary score
        cutoffs: Bands in ascending order
        margin: Width of the window next to each boundary
        threshold: Grammar score separating promotion from demotion

    Returns:
        TieBreakResult: Base level, final level and whether an adjustment fired
    """
    base_level = map_to_level(score, cutoffs)
    result = TieBreakResult(base_level=base_level, level=base_level)

    for index, band in enumerate(cutoffs):
        if band.min_score - margin <= score < band.min_score and grammar_score >= threshold:
            result = TieBreakResult(base_level=base_level, level=band.level, tie_breaker_applied=True)

        if band.max_score < score <= band.max_score + margin and grammar_score < threshold and index > 0:
            result = TieBreakResult(
                base_level=base_level,
                level=cutoffs[index - 1].level,
                tie_breaker_applied=True,
            )

    if result.tie_breaker_applied:
        logger.debug(
            "Tie-break adjusted level",
            extra={
                "score": score,
                "grammar_score": grammar_score,
                "base_level": base_level.value,
                "adjusted_level": result.level.value,
            }
        )

    return result


def determine_overall_level(levels: Iterable[SemfLevel]) -> SemfLevel:
    """Overall level is the weakest of the given skill levels.

    Raises:
        ValueError: If no levels are given
    """
    return SemfLevel.from_ordinal(min(level.ordinal for level in levels))
