"""Custom exception classes for the SEMF scoring service.

The scoring engine itself never raises for bad answers; these exceptions are
used at the API boundary where requests are validated before scoring.
"""

from typing import Any, Dict, List, Optional

from semf.utils.constants import ErrorCodes


class SemfError(Exception):
    """Base exception class for all SEMF application errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize SEMF error.

        Args:
            message: Error message
            error_code: Application-specific error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary representation.

        Returns:
            Dict[str, Any]: Exception data
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        parts = [self.message]
        if self.error_code:
            parts.append(f"Code: {self.error_code}")
        if self.details:
            parts.append(f"Details: {self.details}")
        return " | ".join(parts)


class ValidationError(SemfError):
    """Exception for input validation errors."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        validation_errors: Optional[List[str]] = None,
        **kwargs
    ):
        """Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            value: Invalid value
            validation_errors: List of specific validation errors
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        if validation_errors:
            details["validation_errors"] = validation_errors

        kwargs["details"] = details
        kwargs.setdefault("error_code", ErrorCodes.VALIDATION_ERROR)
        super().__init__(message, **kwargs)

        self.field = field
        self.value = value
        self.validation_errors = validation_errors or []


class ResourceNotFoundError(SemfError):
    """Exception for lookups of resources that do not exist."""

    def __init__(
        self,
        resource_type: str,
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        **kwargs
    ):
        """Initialize resource not found error.

        Args:
            resource_type: Kind of resource (e.g. "level")
            resource_id: Identifier that was looked up
            message: Custom error message
            **kwargs: Additional arguments for parent class
        """
        if not message:
            message = f"{resource_type.capitalize()} not found"
            if resource_id:
                message += f": {resource_id}"

        details = kwargs.get("details", {})
        details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        kwargs["details"] = details
        kwargs.setdefault("error_code", ErrorCodes.RESOURCE_NOT_FOUND)
        super().__init__(message, **kwargs)

        self.resource_type = resource_type
        self.resource_id = resource_id
