"""
Custom exception classes for unified error handling.

Every error is raised where it happens and converted to a JSON response
exactly once, by the handlers registered in `register_exception_handlers`.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppBaseError(Exception):
    """Base exception for all application errors."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, detail: str | None = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class ValidationError(AppBaseError):
    """Raised when caller input is missing or malformed."""
    status_code = status.HTTP_400_BAD_REQUEST


class ConfigurationError(AppBaseError):
    """Raised when a required credential or setting is absent."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            detail="Check the server environment / .env file.",
        )


class UpstreamError(AppBaseError):
    """Raised when Supabase, the embeddings API or the LLM API fails."""

    def __init__(self, service: str, original_error: str):
        self.service = service
        super().__init__(message=original_error, detail=f"Upstream service '{service}' failed")


class NotFoundError(AppBaseError):
    """Raised when a referenced entity (e.g. a syllabus node) does not exist."""
    status_code = status.HTTP_404_NOT_FOUND


class UnsupportedMediaTypeError(AppBaseError):
    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE


class NotImplementedFeatureError(AppBaseError):
    status_code = status.HTTP_501_NOT_IMPLEMENTED


# ── Utility: convert to JSON responses ───────────────────

def app_error_to_response(error: AppBaseError) -> JSONResponse:
    """Convert an AppBaseError to a JSONResponse with a consistent body."""
    return JSONResponse(
        status_code=error.status_code,
        content={
            "error": error.message,
            "detail": error.detail,
            "type": type(error).__name__,
        },
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request body"


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error → JSON handlers to the application."""

    @app.exception_handler(AppBaseError)
    async def handle_app_error(request: Request, exc: AppBaseError):
        logger.error(f"❌ {request.method} {request.url.path} → {type(exc).__name__}: {exc.message}")
        return app_error_to_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        error = ValidationError(_format_validation_errors(exc))
        logger.error(f"❌ {request.method} {request.url.path} → invalid body: {error.message}")
        return app_error_to_response(error)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception(f"❌ Unhandled error in {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc), "detail": None, "type": type(exc).__name__},
        )
