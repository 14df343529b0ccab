"""Scoring API endpoints for the SEMF service.

This module exposes the scoring engine over HTTP: scoring a submission,
grading raw scores only, and the level guide.
"""

from fastapi import APIRouter, Request, status

from semf.schemas.base import create_success_response
from semf.schemas.scoring_schemas import (
    LevelGuideEntryResponse,
    LevelGuideResponse,
    RawScoresResponse,
    ScoreRequest,
    SemfReportResponse,
)
from semf.services.report_builder import get_level_guide
from semf.services.scoring_service import get_scoring_service
from semf.utils.constants import ErrorCodes
from semf.utils.exceptions import ResourceNotFoundError, ValidationError
from semf.utils.logger import get_api_logger
from semf.utils.validators import validate_answer_set, validate_level

router = APIRouter(
    prefix="/scoring",
    responses={
        400: {"description": "Invalid submission"},
        404: {"description": "Level not found"},
        422: {"description": "Validation error"},
        500: {"description": "Internal server error"}
    }
)

logger = get_api_logger()


def _validated_answers(request: ScoreRequest):
    validation = validate_answer_set(request.answers)
    if not validation.is_valid:
        raise ValidationError(
            "Submission contains unknown question numbers",
            field="answers",
            validation_errors=validation.errors,
            error_code=ErrorCodes.INVALID_QUESTION_ID,
        )
    if validation.warnings:
        logger.debug("Partial submission", extra={"warnings": validation.warnings})
    return validation.cleaned_value


@router.post(
    "/semf",
    response_model=SemfReportResponse,
    status_code=status.HTTP_200_OK,
    summary="Score a test submission",
)
async def score_submission(body: ScoreRequest, request: Request) -> SemfReportResponse:
    """Grade a submission and return its SEMF report."""
    answers = _validated_answers(body)
    report = get_scoring_service().score(answers)

    return create_success_response(
        data=report,
        message="Submission scored successfully",
        request_id=getattr(request.state, "request_id", None),
    )


@router.post(
    "/raw-scores",
    response_model=RawScoresResponse,
    summary="Grade a submission into raw skill counts",
)
async def grade_submission(body: ScoreRequest, request: Request) -> RawScoresResponse:
    """Grade a submission without leveling it."""
    answers = _validated_answers(body)
    raw_scores = get_scoring_service().calculate_raw_scores(answers)

    return create_success_response(
        data=raw_scores,
        request_id=getattr(request.state, "request_id", None),
    )


@router.get(
    "/levels",
    response_model=LevelGuideResponse,
    summary="List SEMF levels",
)
async def list_levels(request: Request) -> LevelGuideResponse:
    """Title, score range and description of every SEMF level."""
    return create_success_response(
        data=get_level_guide(),
        request_id=getattr(request.state, "request_id", None),
    )


@router.get(
    "/levels/{level}",
    response_model=LevelGuideEntryResponse,
    summary="Get one SEMF level",
)
async def get_level(level: str, request: Request) -> LevelGuideEntryResponse:
    """Guide entry for a single level code such as S3."""
    validation = validate_level(level)
    if not validation.is_valid:
        raise ResourceNotFoundError("level", level, error_code=ErrorCodes.LEVEL_NOT_FOUND)

    entry = next(item for item in get_level_guide() if item.level == validation.cleaned_value)

    return create_success_response(
        data=entry,
        request_id=getattr(request.state, "request_id", None),
    )
