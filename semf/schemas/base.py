"""Base Pydantic schemas for the SEMF API.

This module provides the response envelope and metadata shared by all
API endpoints.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

# Generic type variable for data
DataType = TypeVar('DataType')


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = {
        "validate_assignment": True,
        "arbitrary_types_allowed": False,
    }


class ResponseMetadata(BaseSchema):
    """Metadata included in API responses."""

    request_id: Optional[str] = Field(None, description="Unique request identifier")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Response timestamp"
    )
    version: str = Field(default="1.0", description="API version")


class BaseResponse(BaseSchema, Generic[DataType]):
    """Base response schema for all API endpoints."""

    success: bool = Field(..., description="Whether the request was successful")
    message: Optional[str] = Field(None, description="Human-readable message")
    data: Optional[DataType] = Field(None, description="Response data")
    meta: Optional[ResponseMetadata] = Field(None, description="Response metadata")


class SuccessResponse(BaseResponse[DataType], Generic[DataType]):
    """Success response schema."""

    success: bool = Field(default=True, description="Always true for success responses")

    @classmethod
    def create(
        cls,
        data: DataType,
        message: Optional[str] = None,
        meta: Optional[ResponseMetadata] = None
    ) -> "SuccessResponse[DataType]":
        """Create a success response.

        Args:
            data: Response data
            message: Optional success message
            meta: Optional metadata

        Returns:
            SuccessResponse: Success response instance
        """
        return cls(
            success=True,
            data=data,
            message=message,
            meta=meta or ResponseMetadata()
        )


class ErrorDetail(BaseSchema):
    """Error information returned by exception handlers."""

    code: Any = Field(..., description="Error code or HTTP status")
    message: str = Field(..., description="Error message")
    request_id: Optional[str] = Field(None, description="Request identifier")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseSchema):
    """Error response body."""

    error: ErrorDetail


def create_success_response(
    data: Any,
    message: Optional[str] = None,
    request_id: Optional[str] = None
) -> SuccessResponse:
    """Create a success response with metadata.

    Args:
        data: Response data
        message: Optional success message
        request_id: Optional request ID

    Returns:
        SuccessResponse: Success response
    """
    meta = ResponseMetadata()
    if request_id:
        meta.request_id = request_id

    return SuccessResponse.create(data=data, message=message, meta=meta)


def create_error_content(
    code: Any,
    message: str,
    request_id: Optional[str] = None,
    details: Optional[Any] = None
) -> Dict[str, Any]:
    """Build a JSON-ready error body.

    Args:
        code: Application error code or HTTP status
        message: Error message
        request_id: Request ID for tracking
        details: Additional error details

    Returns:
        Dict[str, Any]: Error response content
    """
    error = ErrorDetail(code=code, message=message, request_id=request_id, details=details)
    return ErrorResponse(error=error).model_dump(mode="json", exclude_none=True)
