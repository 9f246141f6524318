"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNSUPPORTED_FILE_TYPE = "UNSUPPORTED_FILE_TYPE"
    MISSING_FILE = "MISSING_FILE"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"

    # Not found errors (404)
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    ROUTE_NOT_FOUND = "ROUTE_NOT_FOUND"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Input failed validation; carries one message per offending field."""

    def __init__(self, errors: list[str], message: str = "Validation error") -> None:
        self.errors = errors
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400,
            details=errors,
        )


class UnsupportedFileTypeError(AppException):
    """Uploaded file extension or content type is not allowed."""

    def __init__(self, filename: str, content_type: str | None) -> None:
        super().__init__(
            error_code=ErrorCode.UNSUPPORTED_FILE_TYPE,
            message="Only images (JPEG, PNG, GIF) and PDF files are allowed",
            status_code=400,
            details={"filename": filename, "content_type": content_type},
        )


class MissingFileError(AppException):
    """Request carried no file in the expected form field."""

    def __init__(self, field: str) -> None:
        super().__init__(
            error_code=ErrorCode.MISSING_FILE,
            message="No file uploaded",
            status_code=400,
            details={"field": field},
        )


class PayloadTooLargeError(AppException):
    """Uploaded file exceeds the size ceiling."""

    def __init__(self, max_bytes: int) -> None:
        super().__init__(
            error_code=ErrorCode.PAYLOAD_TOO_LARGE,
            message=f"File size too large. Maximum size is {max_bytes // (1024 * 1024)}MB.",
            status_code=400,
            details={"max_bytes": max_bytes},
        )


class UploadNotFoundError(AppException):
    """Stored file not found."""

    def __init__(self, filename: str) -> None:
        super().__init__(
            error_code=ErrorCode.FILE_NOT_FOUND,
            message="File not found",
            status_code=404,
            details={"filename": filename},
        )
