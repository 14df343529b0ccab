"""Constants and enums for the SEMF scoring service.

This module defines the skills, levels, question ranges and scoring thresholds
used throughout the application for consistency and type safety.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


# ============================================================================
# CORE ENUMS
# ============================================================================

class Skill(str, Enum):
    """Skills measured by the SEMF core skills test."""

    GRAMMAR_VOCABULARY = "GrammarVocabulary"
    READING_WRITING = "ReadingWriting"
    LISTENING = "Listening"

    @property
    def display_name(self) -> str:
        """Human readable skill name used in reports."""
        return SKILL_DISPLAY_NAMES[self]

    @property
    def max_score(self) -> int:
        """Number of questions (points) available for this skill."""
        return SKILL_MAX_SCORES[self]


class SemfLevel(str, Enum):
    """ShaBridge English Mastery Framework levels, lowest first."""

    S1 = "S1"
    S2 = "S2"
    S3 = "S3"
    S4 = "S4"
    S5 = "S5"

    @property
    def ordinal(self) -> int:
        """Numeric position of the level (S1 -> 1 ... S5 -> 5)."""
        return int(self.value[1:])

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "SemfLevel":
        """Get level from its numeric position.

        Args:
            ordinal: Level number between 1 and 5

        Returns:
            SemfLevel: Corresponding level

        Raises:
            ValueError: If ordinal is outside 1-5
        """
        return cls(f"S{ordinal}")


class GradingMethod(str, Enum):
    """How answers within a question range are graded."""

    EXACT_CHOICE = "exact_choice"
    ORDERED_SEQUENCE = "ordered_sequence"
    KEYWORD_HEURISTIC = "keyword_heuristic"
    ESSAY_HEURISTIC = "essay_heuristic"


# ============================================================================
# SKILL CONSTANTS
# ============================================================================

SKILL_DISPLAY_NAMES: Mapping[Skill, str] = MappingProxyType({
    Skill.GRAMMAR_VOCABULARY: "Grammar & Vocabulary",
    Skill.READING_WRITING: "Reading & Writing",
    Skill.LISTENING: "Listening",
})

SKILL_MAX_SCORES: Mapping[Skill, int] = MappingProxyType({
    Skill.GRAMMAR_VOCABULARY: 20,
    Skill.READING_WRITING: 24,
    Skill.LISTENING: 12,
})

# Skills that receive a level; grammar only drives the tie-break.
LEVELED_SKILLS: Tuple[Skill, ...] = (Skill.READING_WRITING, Skill.LISTENING)
TIE_BREAKER_SKILL = Skill.GRAMMAR_VOCABULARY


class ScoringConstants:
    """Scoring algorithm constants."""

    NORMALIZED_SCALE_MAX = 50
    TIE_BREAK_MARGIN = 2
    TIE_BREAK_GRAMMAR_THRESHOLD = 35
    FALLBACK_LEVEL = SemfLevel.S1
    DISPLAY_DECIMALS = 1


class QuestionConstants:
    """Test structure constants."""

    TOTAL_QUESTIONS = 56
    FIRST_QUESTION = 1
    LAST_QUESTION = 56

    # Free-text answers (41-43)
    KEYWORD_MIN_HITS = 2
    KEYWORD_MIN_LENGTH = 20

    # Essay (44)
    ESSAY_MIN_WORDS = 80
    ESSAY_MAX_WORDS = 200

    ORDERING_SEPARATOR = ", "


# ============================================================================
# LEVEL TABLES
# ============================================================================

# Inclusive (min, max) bounds on the 0-50 normalized scale, in scan order.
LEVEL_CUTOFFS: Mapping[SemfLevel, Tuple[int, int]] = MappingProxyType({
    SemfLevel.S1: (0, 15),
    SemfLevel.S2: (16, 25),
    SemfLevel.S3: (26, 33),
    SemfLevel.S4: (34, 42),
    SemfLevel.S5: (43, 50),
})

LEVEL_DESCRIPTIONS: Mapping[SemfLevel, str] = MappingProxyType({
    SemfLevel.S1: "Basic user - understands and uses simple expressions.",
    SemfLevel.S2: "Elementary user - can handle short, routine exchanges.",
    SemfLevel.S3: "Independent user - can deal with most everyday situations.",
    SemfLevel.S4: "Proficient user - can interact fluently and spontaneously.",
    SemfLevel.S5: "Mastery - can express ideas precisely in complex situations.",
})

LEVEL_TITLES: Mapping[SemfLevel, str] = MappingProxyType({
    SemfLevel.S1: "Basic User",
    SemfLevel.S2: "Elementary User",
    SemfLevel.S3: "Independent User",
    SemfLevel.S4: "Proficient User",
    SemfLevel.S5: "Mastery",
})

LEVEL_RECOMMENDATIONS: Dict[SemfLevel, str] = {
    SemfLevel.S1: (
        "Recommendations: Focus on basic vocabulary building, simple sentence "
        "structures, and everyday expressions. Practice listening to slow, clear speech."
    ),
    SemfLevel.S2: (
        "Recommendations: Expand vocabulary for common situations, practice past "
        "and future tenses, and work on basic conversation skills."
    ),
    SemfLevel.S3: (
        "Recommendations: Study complex grammar structures, academic vocabulary, "
        "and practice expressing opinions clearly in writing."
    ),
    SemfLevel.S4: (
        "Recommendations: Refine advanced grammar usage, expand professional "
        "vocabulary, and practice nuanced expression in complex topics."
    ),
    SemfLevel.S5: (
        "Recommendations: Maintain proficiency through exposure to complex texts, "
        "academic writing, and professional communication contexts."
    ),
}

DEFAULT_RECOMMENDATION = "Continue practicing to improve your English proficiency."


class ErrorCodes:
    """Application error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_QUESTION_ID = "INVALID_QUESTION_ID"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    LEVEL_NOT_FOUND = "LEVEL_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
