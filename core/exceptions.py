"""Custom exception classes for the FitTrack API.

Every error the services raise on purpose derives from `AppException`, which
carries the HTTP status code and a details dictionary for the error handlers.
"""

from typing import Optional, Any, Dict, List, Iterable


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any = None):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'User', 'BMI record').
            identifier: ID that was looked up; omitted from the message when None.
        """
        if identifier is None:
            message = f"No {resource} found"
        else:
            message = f"{resource} with id '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ValidationError(AppException):
    """Exception raised when input validation fails.

    Carries either a single offending field or a list of
    ``{"field": ..., "message": ...}`` pairs.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        errors: Optional[List[Dict[str, str]]] = None,
    ):
        details: Dict[str, Any] = {}
        if field:
            details["field"] = field
        if errors:
            details["errors"] = errors
        super().__init__(message, status_code=400, details=details)


class InvalidDateError(ValidationError):
    """Raised when a date string is not in DD-MM-YYYY format."""

    def __init__(self, value: Any, field: Optional[str] = "date"):
        self.value = value
        super().__init__("Invalid date format. Please use DD-MM-YYYY", field=field)


class ProfileIncompleteError(AppException):
    """Raised when BMR/TDEE are needed but the profile lacks biometrics."""

    def __init__(self, missing_fields: Iterable[str]):
        missing = list(missing_fields)
        super().__init__(
            "Profile incomplete: %s required" % ", ".join(missing),
            status_code=412,
            details={"missing_fields": missing},
        )


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)
