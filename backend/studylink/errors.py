from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from fastapi import status


@dataclass
class FieldError:
    field: str
    message: str


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid data"

    def __init__(
        self,
        details: list[FieldError] | None = None,
        message: str | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.details = list(details or [])
        self.code = code

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message, "details": [asdict(item) for item in self.details]}
        if self.code:
            payload["code"] = self.code
        return payload


class AuthenticationRequired(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class PermissionDenied(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class Gone(ApiError):
    status_code = status.HTTP_410_GONE
    default_message = "Resource has been deleted"
