"""Global error handler: every failure leaves as ``{"success": false, "error": ...}``."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from imara.errors import ImaraError

logger = structlog.get_logger()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def describe_validation_errors(errors: list[dict]) -> str:
    """Condense pydantic errors into one client-facing sentence."""
    missing = [str(e["loc"][-1]) for e in errors if e.get("type") == "missing" and e.get("loc")]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ())[1:]) or "request"
    return f"Invalid {field}: {first.get('msg', 'invalid value')}"


def setup_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(ImaraError)
    async def domain_exception_handler(request: Request, exc: ImaraError) -> JSONResponse:
        """Map domain errors to their status code."""
        logger.info(
            "request_rejected",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=exc.message,
        )
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle HTTP exceptions with consistent JSON format."""
        message = "Route not found" if exc.status_code == 404 and exc.detail == "Not Found" else str(exc.detail)
        return error_response(exc.status_code, message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        """Request bodies and query params that fail validation are client errors (400)."""
        return error_response(400, describe_validation_errors(list(exc.errors())))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unhandled exceptions. Returns JSON without details."""
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=exc,
        )
        return error_response(500, "Internal server error")
