"""
Exercise Tracker API - Custom Exception Classes.

Exception hierarchy for application error handling.
"""

from typing import Optional


class ExerciseTrackerException(Exception):
    """
    Base exception class for the Exercise Tracker application.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code for the error.
        detail: Additional error details.
    """

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 500,
        detail: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)


class ClientInputError(ExerciseTrackerException):
    """
    Exception raised for invalid client input.

    Used when:
    - Required fields are missing
    - Fields cannot be coerced to their type
    - The request body cannot be decoded
    """

    def __init__(
        self,
        message: str = "Invalid input",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=400,
            detail=detail
        )


class MissingFieldError(ClientInputError):
    """Exception raised when a required field is absent or empty."""


class InvalidNumberError(ClientInputError):
    """Exception raised when a numeric field does not parse as an integer."""


class NotFoundError(ExerciseTrackerException):
    """
    Exception raised when a resource is not found.

    Used when:
    - User not found
    - User identifier is malformed
    """

    def __init__(
        self,
        message: str = "Resource not found",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=404,
            detail=detail
        )


class StoreError(ExerciseTrackerException):
    """
    Exception raised when the document store fails.

    The message is generic; ``detail`` carries the underlying
    driver error text.
    """

    def __init__(
        self,
        message: str = "Database error",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=f"{message}: {detail}" if detail else message,
            status_code=500,
            detail=detail
        )
