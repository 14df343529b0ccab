"""Scoring request/response schemas for the SEMF API."""

from typing import Dict, List, Optional

from pydantic import Field

from semf.models.scoring import LevelGuideEntry, RawScores, SemfReport
from semf.schemas.base import BaseSchema, SuccessResponse


class ScoreRequest(BaseSchema):
    """A completed test submission."""

    answers: Dict[int, Optional[str]] = Field(
        default_factory=dict,
        description="Question number (1-56) -> answer text; unanswered questions may be omitted",
    )

    model_config = {
        **BaseSchema.model_config,
        "json_schema_extra": {
            "example": {
                "answers": {
                    "1": "B",
                    "36": "B, C, D, A",
                    "41": "Remote work offers flexibility and removes the daily commute.",
                    "45": "B",
                }
            }
        }
    }


SemfReportResponse = SuccessResponse[SemfReport]
RawScoresResponse = SuccessResponse[RawScores]
LevelGuideResponse = SuccessResponse[List[LevelGuideEntry]]
LevelGuideEntryResponse = SuccessResponse[LevelGuideEntry]
