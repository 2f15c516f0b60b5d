"""RFC 9457 problem responses for FastAPI/Starlette.

Exports:
    ProblemResponder: Owns configuration, builds and sends problem responses
    ProblemException: Raisable explicit problem
    build_problem_response: Render a document into a Starlette response
    get_problem_responder: FastAPI dependency returning the installed responder
    register_exception_handlers: Register the exception handlers with an app
"""

from problem_details.presentation.api.dependencies import get_problem_responder
from problem_details.presentation.api.exception_handlers import (
    register_exception_handlers,
)
from problem_details.presentation.api.problem_exception import ProblemException
from problem_details.presentation.api.problem_responder import (
    ProblemHook,
    ProblemResponder,
)
from problem_details.presentation.api.problem_response import build_problem_response

__all__ = [
    "ProblemException",
    "ProblemHook",
    "ProblemResponder",
    "build_problem_response",
    "get_problem_responder",
    "register_exception_handlers",
]
