"""Answer key model.

Wraps the static answer data so a scoring service can be given a different key
(e.g. for another test form) without touching the grading logic.
"""

from typing import Dict, Tuple

from pydantic import Field

from semf.data import answer_key as key_data
from semf.models.base import ValueModel


class AnswerKey(ValueModel):
    """Expected answers for every graded question."""

    choices: Dict[int, str] = Field(..., description="Single-letter answers")
    orderings: Dict[int, str] = Field(..., description="Exact sentence ordering strings")
    keywords: Dict[int, Tuple[str, ...]] = Field(..., description="Keyword sets for free-text answers")
    essay_question: int = Field(..., ge=1)
    essay_signals: Tuple[str, ...] = Field(..., min_length=1)

    @classmethod
    def default(cls) -> "AnswerKey":
        """Answer key for the current SEMF core skills test form."""
        return cls(
            choices=dict(key_data.CHOICE_ANSWERS),
            orderings=dict(key_data.ORDERING_ANSWERS),
            keywords=dict(key_data.TEXT_ANSWER_KEYWORDS),
            essay_question=key_data.ESSAY_QUESTION,
            essay_signals=key_data.ESSAY_ARGUMENT_SIGNALS,
        )


DEFAULT_ANSWER_KEY = AnswerKey.default()
