"""
Custom exceptions and error handling for Trip Board.

Defines application-specific exceptions with error codes so the gateway can
turn any failure into a consistent ``{"error": message}`` response.

Usage:
    from tripboard.errors import StoreError, ErrorCode

    raise StoreError("relation \"activities\" does not exist")
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes mapped to HTTP status codes."""

    # Request errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Backing store errors
    NOT_CONFIGURED = "NOT_CONFIGURED"
    STORE_ERROR = "STORE_ERROR"

    # Client facade errors; status is the response status received
    HTTP_ERROR = "HTTP_ERROR"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.NOT_CONFIGURED: 500,
    ErrorCode.STORE_ERROR: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


class TripBoardError(Exception):
    """Base exception for all Trip Board errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return STATUS_CODES.get(self.code, 500)


class ConfigurationError(TripBoardError):
    """The backing database is not configured."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.NOT_CONFIGURED):
        super().__init__(message, code=code)


class ValidationError(TripBoardError):
    """Request payload is missing a required field or has a bad value."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(message, code=code)


class StoreError(TripBoardError):
    """The database rejected or failed an operation. Message is the driver's."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.STORE_ERROR):
        super().__init__(message, code=code)


class RouteNotFoundError(TripBoardError):
    """No route matches the request path and method."""

    def __init__(self, message: str = "Not found", code: ErrorCode = ErrorCode.NOT_FOUND):
        super().__init__(message, code=code)


class ApiRequestError(TripBoardError):
    """The Trip Board API answered with a non-success status."""

    def __init__(self, status_code: int):
        self.response_status = status_code
        super().__init__(f"HTTP {status_code}", code=ErrorCode.HTTP_ERROR)

    @property
    def status_code(self) -> int:
        return self.response_status
