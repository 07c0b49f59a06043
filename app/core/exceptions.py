"""
Domain exceptions and their HTTP mapping.
Challenge: Services stay free of HTTP concerns; handlers give one JSON error shape.

    TrophyVaultError (500)
    ├── ValidationError   → 400
    │   ├── SelfRatingError
    │   └── UploadError
    ├── NotFoundError     → 404
    └── FileStorageError  → 500
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TrophyVaultError(Exception):
    """Base for application errors. `context` is returned as details only for client errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "server_error"

    def __init__(self, message: str = "An unexpected error occurred", context: dict[str, Any] | None = None):
        self.message = message
        self.context = context or {}
        super().__init__(message)


class ValidationError(TrophyVaultError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "validation_error"


class SelfRatingError(ValidationError):
    def __init__(self, message: str = "Cannot rate your own room", context: dict[str, Any] | None = None):
        super().__init__(message, context)


class UploadError(ValidationError):
    """Rejected upload: missing file, disallowed content type, or too large."""


class NotFoundError(TrophyVaultError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "not_found"

    def __init__(
        self, resource: str = "Resource", context: dict[str, Any] | None = None, *, message: str | None = None
    ):
        super().__init__(message or f"{resource} not found", context)


class FileStorageError(TrophyVaultError):
    pass


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain and request-validation errors to structured JSON responses."""

    @app.exception_handler(TrophyVaultError)
    async def handle_app_error(request: Request, exc: TrophyVaultError):
        content: dict[str, Any] = {"error": exc.error, "message": exc.message}
        if exc.status_code < 500:
            logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
            if exc.context:
                content["details"] = exc.context
        else:
            logger.error("%s %s failed: %s | %s", request.method, request.url.path, exc.message, exc.context)
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        logger.warning("%s %s invalid payload", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "validation_error",
                "message": "Invalid data",
                "details": jsonable_encoder(exc.errors()),
            },
        )
