"""Error handlers for the FastAPI application.

Renders every failure as the same JSON envelope:
``{"error": {"message", "status_code", "details"}}``.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from core.exceptions import AppException
from core.logger import get_logger
from core.validation import format_errors

logger = get_logger("core.error_handlers")


def create_error_response(
    message: str,
    status_code: int = 500,
    details: dict = None
) -> JSONResponse:
    """Create a standardized error response.

    Args:
        message: Error message.
        status_code: HTTP status code.
        details: Optional error details dictionary.

    Returns:
        JSONResponse with error details.
    """
    error_body = {
        "error": {
            "message": message,
            "status_code": status_code,
        }
    }

    if details:
        error_body["error"]["details"] = details

    return JSONResponse(
        status_code=status_code,
        content=error_body
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle application exceptions raised by services and routers."""
    logger.warning(
        "Application error: %s [%s %s]",
        exc.message,
        request.method,
        request.url.path
    )

    return create_error_response(
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle request body/query validation errors raised by FastAPI."""
    errors = []
    for error, flat in zip(exc.errors(), format_errors(exc)):
        errors.append({
            "field": flat["field"],
            "message": flat["message"],
            "type": error["type"]
        })

    logger.warning(
        "Validation error on %s %s: %s",
        request.method,
        request.url.path,
        errors
    )

    return create_error_response(
        message="Validation error",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        details={"validation_errors": errors}
    )


async def sqlalchemy_exception_handler(
    request: Request,
    exc: SQLAlchemyError
) -> JSONResponse:
    """Handle SQLAlchemy errors without leaking them to the client."""
    logger.error(
        "Database error on %s %s: %s",
        request.method,
        request.url.path,
        str(exc),
        exc_info=True
    )

    return create_error_response(
        message="A database error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={"type": "database_error"}
    )


async def generic_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        str(exc),
        exc_info=True
    )

    return create_error_response(
        message="An internal server error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={"type": "internal_error"}
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Exception handlers registered")
