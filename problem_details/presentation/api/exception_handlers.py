"""Global exception handlers for FastAPI/Starlette applications.

This module provides exception handlers that turn exceptions into RFC 9457
problem responses through the installed ``ProblemResponder``.

Handlers:
    problem_exception_handler: ProblemException, built from explicit fields
    problem_error_handler: ProblemError, converted with its status/code/violations
    http_exception_handler: Starlette/FastAPI HTTPException
    validation_exception_handler: FastAPI RequestValidationError (422)
    generic_exception_handler: Catches all unhandled exceptions (500)

Exports:
    register_exception_handlers: Register the handlers with an application
"""

from fastapi.exceptions import RequestValidationError
from starlette.applications import Starlette
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import Response

from problem_details.core.errors import ProblemError
from problem_details.presentation.api.dependencies import get_problem_responder
from problem_details.presentation.api.problem_exception import ProblemException

REQUEST_VALIDATION_STATUS = 422


async def problem_exception_handler(request: Request, exc: Exception) -> Response:
    """Convert ProblemException into a problem response.

    Args:
        request: Current request.
        exc: ProblemException raised by a route or dependency.

    Returns:
        Response: Problem built from the exception's explicit fields.
    """
    # Type narrowing: registered only for ProblemException
    assert isinstance(exc, ProblemException)
    responder = get_problem_responder(request)
    return await responder.problem(request, exc.status, **exc.fields)


async def problem_error_handler(request: Request, exc: Exception) -> Response:
    """Convert ProblemError (status, code, violations) into a problem response."""
    assert isinstance(exc, ProblemError)
    responder = get_problem_responder(request)
    return await responder.from_exception(request, exc)


async def http_exception_handler(request: Request, exc: Exception) -> Response:
    """Convert HTTPException into a problem response.

    Headers carried by the exception (e.g. ``WWW-Authenticate``,
    ``Allow``) are preserved.

    Example:
        >>> raise HTTPException(status_code=401, detail="Invalid token")
        >>> # {
        >>> #   "type": "https://api.example.com/errors/unauthorized",
        >>> #   "title": "Unauthorized",
        >>> #   "status": 401,
        >>> #   "detail": "Invalid token",
        >>> #   "instance": "/accounts"
        >>> # }
    """
    assert isinstance(exc, StarletteHTTPException)
    responder = get_problem_responder(request)
    return await responder.from_exception(
        request, exc, headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: Exception) -> Response:
    """Convert RequestValidationError into a 422 problem with field errors.

    Example:
        >>> # POST /users with an invalid email
        >>> # {
        >>> #   "type": "about:blank",
        >>> #   "title": "Unprocessable Content",
        >>> #   "status": 422,
        >>> #   "detail": "...",
        >>> #   "instance": "/users",
        >>> #   "errors": [
        >>> #     {"field": "email", "message": "...", "keyword": "value_error"}
        >>> #   ]
        >>> # }
    """
    assert isinstance(exc, RequestValidationError)
    responder = get_problem_responder(request)
    return await responder.from_exception(
        request, exc, status=REQUEST_VALIDATION_STATUS
    )


async def generic_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle unexpected Python exceptions.

    The exception is logged with its type and message; the client receives
    a problem document (sanitized in production).
    """
    responder = get_problem_responder(request)
    responder.logger.error(
        "Unhandled exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )
    return await responder.from_exception(request, exc)


def register_exception_handlers(
    app: Starlette, *, convert_framework_errors: bool = True
) -> None:
    """Register exception handlers with an application.

    ``ProblemException`` and ``ProblemError`` are always handled; framework
    errors and uncaught exceptions only when ``convert_framework_errors``
    is on.

    Args:
        app: FastAPI or Starlette application.
        convert_framework_errors: Also convert HTTPException,
            RequestValidationError and any other uncaught exception.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(ProblemException, problem_exception_handler)
    app.add_exception_handler(ProblemError, problem_error_handler)

    if not convert_framework_errors:
        return

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    # Catch-all for 500 errors
    app.add_exception_handler(Exception, generic_exception_handler)
