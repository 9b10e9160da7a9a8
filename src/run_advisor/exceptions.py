"""
Custom exceptions for the run advisor.

The recommendation engine itself never raises for recoverable situations:
missing check-ins, short histories and empty windows degrade to a
conservative recommendation. These exceptions cover the edges around it,
i.e. validating raw user input, loading input files and configuration.
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent error reporting."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Input value errors
    INVALID_DISTANCE = "INVALID_DISTANCE"
    INVALID_DURATION = "INVALID_DURATION"
    INVALID_NAME = "INVALID_NAME"
    INVALID_RATING = "INVALID_RATING"

    # Input files and configuration
    INPUT_FILE_ERROR = "INPUT_FILE_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class RunAdvisorError(Exception):
    """
    Base exception for all run advisor errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class ValidationError(RunAdvisorError):
    """Raised when a user-entered value fails validation."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if field:
            error_details["field"] = field
        self.field = field
        super().__init__(message=message, code=code, details=error_details)


class InvalidDistanceError(ValidationError):
    """Raised when a distance or weekly volume is malformed or out of range."""

    def __init__(self, message: str, field: Optional[str] = "distance") -> None:
        super().__init__(message=message, field=field, code=ErrorCode.INVALID_DISTANCE)


class InvalidDurationError(ValidationError):
    """Raised when a duration string is not a valid mm:ss value."""

    def __init__(self, message: str, field: Optional[str] = "duration") -> None:
        super().__init__(message=message, field=field, code=ErrorCode.INVALID_DURATION)


class InputFileError(RunAdvisorError):
    """Raised when a CLI input file cannot be read or parsed."""

    def __init__(
        self,
        path: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        error_details["path"] = path
        super().__init__(
            message=f"Could not load '{path}': {reason}",
            code=ErrorCode.INPUT_FILE_ERROR,
            details=error_details,
        )


class ConfigurationError(RunAdvisorError):
    """Raised when the engine configuration cannot be loaded."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.CONFIGURATION_ERROR,
            details=details,
        )
