# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error body has the same shape: {"error", "message", "status"} plus an
# optional suggestion and details.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.responses import JSONResponse

from core.models.resolution import Resolution, ResolutionStatus
from lib.dioceses import list_dioceses


class TempusBedeException(Exception):
    """
    Base exception for the Tempus Bede API.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {
            "error": self.code,
            "message": self.message,
            "status": self.status_code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Request Exceptions
# =============================================================================

class InvalidDateError(TempusBedeException):
    """Raised when a date isn't a real YYYY-MM-DD date."""

    def __init__(self, value: str, message: str | None = None):
        super().__init__(
            message=message or f"Invalid date format '{value}'. Expected YYYY-MM-DD format.",
            code="INVALID_DATE",
            status_code=400,
            suggestion="Use a zero-padded calendar date such as 2026-12-25",
            details={"date": value},
        )


class InvalidDioceseError(TempusBedeException):
    """Raised when a diocese code isn't supported."""

    def __init__(self, diocese: str, message: str | None = None):
        supported = list_dioceses()
        super().__init__(
            message=message or f"Invalid diocese '{diocese}'. Supported dioceses: {', '.join(supported)}",
            code="INVALID_DIOCESE",
            status_code=400,
            details={"diocese": diocese, "supported_dioceses": supported},
        )


# =============================================================================
# Lookup Exceptions
# =============================================================================

class LiturgicalDayNotFoundError(TempusBedeException):
    """Raised when the calendar has no entry for the request."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=404,
        )


class EngineFailureError(TempusBedeException):
    """Raised when the calendar engine failed and failures are exposed."""

    def __init__(self, message: str, error: Exception | None = None):
        super().__init__(
            message=message,
            code="ENGINE_FAILURE",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"error": str(error)} if error else None,
        )


def raise_for_resolution(resolution: Resolution, expose_engine_failures: bool = False) -> None:
    """
    Raise the API exception matching a failed Resolution.

    Does nothing for successful resolutions. Engine failures become
    NOT_FOUND unless `expose_engine_failures` is set.
    """
    status = resolution.status
    if status == ResolutionStatus.FOUND:
        return
    if status == ResolutionStatus.INVALID_DATE:
        raise InvalidDateError(resolution.subject, resolution.message)
    if status == ResolutionStatus.UNSUPPORTED_DIOCESE:
        raise InvalidDioceseError(resolution.subject, resolution.message)
    if status == ResolutionStatus.ENGINE_FAILURE and expose_engine_failures:
        raise EngineFailureError("Calendar engine failed to compute liturgical data", resolution.error)
    raise LiturgicalDayNotFoundError(resolution.message)


# =============================================================================
# Exception Handlers
# =============================================================================

async def tempus_bede_exception_handler(
    request: Request,
    exc: TempusBedeException
) -> JSONResponse:
    """Convert TempusBedeException to a JSON error response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def not_found_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Render framework HTTP errors in the API's error shape.

    Unknown routes become NOT_FOUND; anything else keeps its status code.
    """
    if exc.status_code == 404:
        body = TempusBedeException(
            message=f"Route {request.url.path} not found",
            code="NOT_FOUND",
            status_code=404,
        ).to_dict()
    else:
        body = TempusBedeException(
            message=str(exc.detail),
            code="HTTP_ERROR",
            status_code=exc.status_code,
        ).to_dict()
    return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Path and query parameters that fail their declared constraints are
    client errors, reported as 400.
    """
    body = TempusBedeException(
        message="Validation error",
        code="VALIDATION_ERROR",
        status_code=400,
        details={"errors": jsonable_encoder(exc.errors())},
    ).to_dict()
    return JSONResponse(status_code=400, content=body)
