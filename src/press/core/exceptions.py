"""Domain exceptions and the handlers that turn them into HTTP responses."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.press.core.logging import get_logger
from src.press.core.validation import ValidationResult

logger = get_logger(__name__)


class PressError(Exception):
    """Base class for all domain errors."""

    default_message = "Application error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


# --- Lookups ---


class NotFoundError(PressError):
    default_message = "Not found"


class ArtistNotFoundError(NotFoundError):
    default_message = "Artist not found"


class SessionNotFoundError(NotFoundError):
    default_message = "Session not found"


class ProjectNotFoundError(NotFoundError):
    default_message = "Project not found"


class UserNotFoundError(NotFoundError):
    default_message = "User not found"


class EbookNotFoundError(NotFoundError):
    default_message = "Ebook not found"


# --- Validation ---


class ValidationFailedError(PressError):
    """Aggregate of every field error found by a validator."""

    default_message = "Validation failed"

    def __init__(self, result: ValidationResult, message: str | None = None):
        super().__init__(message)
        self.result = result

    @property
    def errors(self):
        return self.result.errors


class InvalidArtistError(ValidationFailedError):
    default_message = "Artist is invalid"


class InvalidProjectError(ValidationFailedError):
    default_message = "Project is invalid"


# --- Login ---


class InvalidLoginError(PressError):
    default_message = "Invalid login"


class PasswordRequiredError(PressError):
    default_message = "A password is required for this account"


# --- Projects ---


class EbookIsNotAPlaceholderError(PressError):
    default_message = "This ebook is not a placeholder"


class ProjectExistsError(PressError):
    default_message = "This ebook already has an active project"


# --- External calls ---


class AppException(PressError):
    """An outbound call failed. The original fault is chained as __cause__."""

    default_message = "External request failed"


def _error_response(status_code: int, detail: str, **extra) -> JSONResponse:
    content = {"detail": detail, "request_id": correlation_id.get()}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return _error_response(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(ValidationFailedError)
    async def validation_handler(request: Request, exc: ValidationFailedError) -> JSONResponse:
        return _error_response(
            422,
            exc.message,
            errors=exc.result.to_list(),
        )

    @app.exception_handler(InvalidLoginError)
    async def invalid_login_handler(request: Request, exc: InvalidLoginError) -> JSONResponse:
        return _error_response(status.HTTP_401_UNAUTHORIZED, exc.message)

    @app.exception_handler(PasswordRequiredError)
    async def password_required_handler(
        request: Request, exc: PasswordRequiredError
    ) -> JSONResponse:
        return _error_response(status.HTTP_401_UNAUTHORIZED, exc.message)

    @app.exception_handler(EbookIsNotAPlaceholderError)
    async def not_placeholder_handler(
        request: Request, exc: EbookIsNotAPlaceholderError
    ) -> JSONResponse:
        return _error_response(status.HTTP_409_CONFLICT, exc.message)

    @app.exception_handler(ProjectExistsError)
    async def project_exists_handler(request: Request, exc: ProjectExistsError) -> JSONResponse:
        return _error_response(status.HTTP_409_CONFLICT, exc.message)

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        logger.warning("External sync failed", error=exc.message, path=request.url.path)
        return _error_response(status.HTTP_502_BAD_GATEWAY, exc.message)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=correlation_id.get(),
            path=request.url.path,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
