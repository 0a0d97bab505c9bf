from __future__ import annotations

from enum import Enum

from fastapi import HTTPException, status
from pydantic import BaseModel


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFLICT = "CONFLICT"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorResponse(BaseModel):
    error: str


class APIError(HTTPException):
    def __init__(
        self,
        code: ErrorCode,
        message: str,
        *,
        status_code: int = status.HTTP_400_BAD_REQUEST,
    ) -> None:
        self.error_code = code
        self.error_message = message
        super().__init__(status_code=status_code, detail=message)


class ConflictError(Exception):
    """Raised by the store when a unique user field is already taken."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"{field} already exists: {value}")


def validation_error(message: str = "Invalid request body") -> APIError:
    return APIError(
        ErrorCode.VALIDATION_ERROR,
        message,
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def conflict(message: str = "username or email already exists") -> APIError:
    return APIError(
        ErrorCode.CONFLICT,
        message,
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def unauthorized(message: str = "Unauthorized") -> APIError:
    return APIError(
        ErrorCode.UNAUTHORIZED,
        message,
        status_code=status.HTTP_401_UNAUTHORIZED,
    )


def forbidden(message: str = "access denied") -> APIError:
    return APIError(
        ErrorCode.FORBIDDEN,
        message,
        status_code=status.HTTP_403_FORBIDDEN,
    )


def not_found(message: str = "not found") -> APIError:
    return APIError(
        ErrorCode.NOT_FOUND,
        message,
        status_code=status.HTTP_404_NOT_FOUND,
    )


def internal_error(message: str = "internal server error") -> APIError:
    return APIError(
        ErrorCode.INTERNAL_ERROR,
        message,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
