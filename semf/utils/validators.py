"""Input validation utilities for the SEMF API.

The scoring engine accepts anything; these checks run at the HTTP boundary so
that obviously malformed submissions are rejected before they reach it.
"""

from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, Field

from semf.utils.constants import QuestionConstants, SemfLevel


class ValidationResult(BaseModel):
    """Result of a validation operation."""

    is_valid: bool = Field(..., description="Whether validation passed")
    errors: List[str] = Field(default_factory=list, description="List of validation errors")
    warnings: List[str] = Field(default_factory=list, description="List of validation warnings")
    cleaned_value: Optional[Any] = Field(default=None, description="Cleaned/normalized value")

    def add_error(self, error: str) -> None:
        """Add a validation error."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a validation warning."""
        self.warnings.append(warning)

    @classmethod
    def success(cls, cleaned_value: Optional[Any] = None) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True, cleaned_value=cleaned_value)

    @classmethod
    def failure(cls, errors: Union[str, List[str]]) -> "ValidationResult":
        """Create a failed validation result."""
        if isinstance(errors, str):
            errors = [errors]
        return cls(is_valid=False, errors=errors)


def validate_answer_set(answers: Mapping[int, Optional[str]]) -> ValidationResult:
    """Validate that every question id in a submission exists in the test.

    Unanswered questions are allowed and reported as warnings.

    Args:
        answers: Question id -> answer text

    Returns:
        ValidationResult: Validation result with the answers as cleaned value
    """
    result = ValidationResult.success(cleaned_value=dict(answers))

    first = QuestionConstants.FIRST_QUESTION
    last = QuestionConstants.LAST_QUESTION
    for question_id in sorted(answers):
        if not first <= question_id <= last:
            result.add_error(f"Question {question_id} is outside {first}-{last}")

    missing = QuestionConstants.TOTAL_QUESTIONS - sum(
        1 for question_id in answers if first <= question_id <= last
    )
    if missing:
        result.add_warning(f"{missing} question(s) unanswered")

    return result


def validate_level(level: str) -> ValidationResult:
    """Validate a SEMF level code such as "S3" (case-insensitive)."""
    try:
        return ValidationResult.success(SemfLevel(level.strip().upper()))
    except ValueError:
        return ValidationResult.failure(f"Unknown SEMF level: {level}")
