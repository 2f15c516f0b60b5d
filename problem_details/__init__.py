"""RFC 9457 Problem Details for HTTP APIs.

Build problem documents from explicit fields or caught exceptions, keep
their member order stable, and render them as application/problem+json or
application/problem+xml according to the Accept header.

Usage:
    from fastapi import FastAPI
    from problem_details import ProblemDetailsSettings, ProblemException, ProblemResponder

    app = FastAPI()
    ProblemResponder(ProblemDetailsSettings(base_url="https://api.example.com/errors")).install(app)

    @app.get("/users/{user_id}")
    async def get_user(user_id: int):
        raise ProblemException(404, detail=f"User {user_id} not found")
"""

from problem_details.application.problem_builder import ProblemBuilder
from problem_details.core.config import ProblemDetailsSettings, get_settings
from problem_details.core.enums import Environment, ResponseFormat
from problem_details.core.errors import FieldViolation, InvalidStatusError, ProblemError
from problem_details.core.serialization import (
    CONTENT_TYPES,
    negotiate_content_type,
    serialize,
    serialize_to_json,
    serialize_to_xml,
)
from problem_details.domain.problem_document import ProblemDocument
from problem_details.domain.problem_types import ProblemType, ProblemTypeRegistry
from problem_details.domain.status_metadata import (
    check_problem_status,
    get_status_title,
    get_type_slug,
    is_client_error,
    is_server_error,
    is_valid_problem_status,
)
from problem_details.presentation.api import (
    ProblemException,
    ProblemResponder,
    get_problem_responder,
    register_exception_handlers,
)

__all__ = [
    "CONTENT_TYPES",
    "Environment",
    "FieldViolation",
    "InvalidStatusError",
    "ProblemBuilder",
    "ProblemDetailsSettings",
    "ProblemDocument",
    "ProblemError",
    "ProblemException",
    "ProblemResponder",
    "ProblemType",
    "ProblemTypeRegistry",
    "ResponseFormat",
    "check_problem_status",
    "get_problem_responder",
    "get_settings",
    "get_status_title",
    "get_type_slug",
    "is_client_error",
    "is_server_error",
    "is_valid_problem_status",
    "negotiate_content_type",
    "register_exception_handlers",
    "serialize",
    "serialize_to_json",
    "serialize_to_xml",
]
