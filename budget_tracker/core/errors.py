"""Application error taxonomy shared by calculators and HTTP handlers."""

from __future__ import annotations

from fastapi import status


class AppError(Exception):
    """Base error carrying a machine-readable code and an HTTP status."""

    code = "INTERNAL_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict[str, str]:
        return {"detail": self.message, "code": self.code}


class InvalidInputError(AppError):
    """Malformed or out-of-range computation input."""

    code = "INVALID_INPUT"
    status_code = status.HTTP_422_UNPROCESSABLE_CONTENT


class NotFoundError(AppError):
    """Referenced project, task or member is absent from upstream data."""

    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, identifier: object | None = None) -> None:
        message = f"{resource} not found."
        if identifier is not None:
            message = f"{resource} {identifier} not found."
        super().__init__(message)
        self.resource = resource
        self.identifier = identifier
