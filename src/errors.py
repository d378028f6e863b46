"""
Application errors and the handlers that turn them into JSON responses.

Every error leaving a route is rendered as ``{"error": <message>}`` so clients
never see framework-specific bodies or a partial payload.
"""

import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base application error carrying the HTTP status it maps to."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_body(self) -> dict:
        return {"error": self.message}


class ValidationError(AppError):
    """Raised when an RSVP submission fails the schema."""

    status_code = 400

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Invalid input: {', '.join(fields)}")

    def to_body(self) -> dict:
        return {"error": self.message, "fields": self.fields}


class AuthErrorKind(str, Enum):
    INVALID_CREDENTIAL = "invalid_credential"
    UNAUTHORIZED = "unauthorized"


class AuthError(AppError):
    status_code = 401

    def __init__(self, kind: AuthErrorKind) -> None:
        self.kind = kind
        message = "Invalid password" if kind == AuthErrorKind.INVALID_CREDENTIAL else "Unauthorized"
        super().__init__(message)


class ConfigError(AppError):
    """A required secret is missing: a deployment defect, not a user mistake."""

    status_code = 500

    def __init__(self, setting: str) -> None:
        self.setting = setting
        super().__init__("Server misconfigured")


class StoreError(AppError):
    """The persistence layer failed. The message is generic on purpose."""

    status_code = 500


class RateLimitExceeded(AppError):
    status_code = 429

    def __init__(self, bucket: str) -> None:
        self.bucket = bucket
        super().__init__("Too many requests")


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, ConfigError):
        logger.error(
            "%s is not configured; refusing %s %s", exc.setting, request.method, request.url.path
        )
    return JSONResponse(exc.to_body(), status_code=exc.status_code)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are client errors (400), same as schema failures."""
    fields = []
    for detail in exc.errors():
        location = [str(part) for part in detail.get("loc", ())[1:]]
        if detail.get("type") == "json_invalid" or not location:
            fields.append("body")
        else:
            fields.append(".".join(location))
    error = ValidationError(list(dict.fromkeys(fields)))
    logger.warning("Rejected malformed request to %s: %s", request.url.path, error.fields)
    return JSONResponse(error.to_body(), status_code=error.status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while processing %s %s", request.method, request.url.path)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
