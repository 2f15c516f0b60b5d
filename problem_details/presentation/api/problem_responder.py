"""Request-facing entry point for problem responses.

``ProblemResponder`` owns one configuration: settings, the problem type
registry, the builder and the optional observation hook. Install it on a
FastAPI (or Starlette) application once during setup; routes then reach it
through ``get_problem_responder`` or simply raise ``ProblemException``.

Sending a problem always follows the same steps:
1. Await the ``on_problem`` hook with the document and the request. A failing
   hook is logged and ignored.
2. Negotiate JSON or XML from the Accept header.
3. Serialize and wrap in a response whose status is the document's status.

Usage:
    from fastapi import FastAPI

    responder = ProblemResponder(
        ProblemDetailsSettings(base_url="https://api.example.com/errors", support_xml=True),
        on_problem=audit_problem,
    )
    responder.register_problem_type("insufficient-funds", status=403, title="Insufficient Funds")

    app = FastAPI()
    responder.install(app)
"""

import inspect
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeAlias

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response

from problem_details.application.problem_builder import ProblemBuilder
from problem_details.core.config import ProblemDetailsSettings, get_settings
from problem_details.core.container import get_logger
from problem_details.core.serialization import negotiate_content_type
from problem_details.domain.problem_document import ProblemDocument
from problem_details.domain.problem_types import ProblemType, ProblemTypeRegistry
from problem_details.domain.protocols import LoggerProtocol
from problem_details.presentation.api.problem_response import build_problem_response

ProblemHook: TypeAlias = Callable[[ProblemDocument, Request], Awaitable[None] | None]

STATE_KEY = "problem_responder"


class ProblemResponder:
    """Builds, observes, negotiates and sends problem responses.

    Args:
        settings: Settings to use; the cached environment settings by default.
        registry: Problem type registry; a new one bound to
            ``settings.base_url`` by default.
        on_problem: Hook called with every document before it is sent.
        logger: Structured logger; the container logger by default.
    """

    def __init__(
        self,
        settings: ProblemDetailsSettings | None = None,
        *,
        registry: ProblemTypeRegistry | None = None,
        on_problem: ProblemHook | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self.settings = settings if settings is not None else get_settings()
        self.registry = (
            registry
            if registry is not None
            else ProblemTypeRegistry(base_url=self.settings.base_url)
        )
        self.logger = logger or get_logger()
        self.builder = ProblemBuilder(self.settings, self.registry, logger=self.logger)
        self.on_problem = on_problem

    def install(self, app: Starlette) -> None:
        """Attach to an application and register the exception handlers.

        Args:
            app: FastAPI or Starlette application.
        """
        from problem_details.presentation.api.exception_handlers import (
            register_exception_handlers,
        )

        setattr(app.state, STATE_KEY, self)
        register_exception_handlers(
            app, convert_framework_errors=self.settings.convert_framework_errors
        )

    def register_problem_type(
        self,
        name: str,
        *,
        status: int,
        title: str,
        type: str | None = None,
    ) -> ProblemType:
        """Register a named problem type (see ``ProblemTypeRegistry.register``)."""
        entry = self.registry.register(name, status=status, title=title, type=type)
        self.logger.info(
            "Problem type registered", name=name, status=entry.status, type=entry.type
        )
        return entry

    def create_problem(self, request: Request, status: int, /, **fields: Any) -> ProblemDocument:
        """Build a document from explicit fields without sending it.

        Raises:
            InvalidStatusError: If status is not a 4xx/5xx code.
        """
        return self.builder.build(status, fields, request_path=request.url.path)

    async def problem(self, request: Request, status: int, /, **fields: Any) -> Response:
        """Build and send a problem from explicit fields.

        Args:
            request: Current request.
            status: HTTP status code (4xx/5xx).
            **fields: Standard members, ``cause`` and extension members.

        Returns:
            Response: The problem response.

        Raises:
            InvalidStatusError: If status is not a 4xx/5xx code.

        Example:
            >>> return await responder.problem(request, 404, detail="User 123 not found")
        """
        return await self.send(self.create_problem(request, status, **fields), request)

    async def from_exception(
        self,
        request: Request,
        error: BaseException,
        *,
        status: int | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        """Convert an exception into a problem and send it."""
        problem = self.builder.from_exception(
            error, request_path=request.url.path, status=status
        )
        return await self.send(problem, request, headers=headers)

    async def send(
        self,
        problem: ProblemDocument,
        request: Request,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        """Run the hook, negotiate the format and render the response.

        Args:
            problem: Finished problem document.
            request: Current request (Accept header, hook argument).
            headers: Extra response headers.

        Returns:
            Response: The problem response.
        """
        await self._notify(problem, request)
        fmt = negotiate_content_type(request.headers.get("accept"), self.settings.support_xml)
        return build_problem_response(problem, fmt, headers=headers)

    async def _notify(self, problem: ProblemDocument, request: Request) -> None:
        if self.on_problem is None:
            return
        try:
            result = self.on_problem(problem, request)
            if inspect.isawaitable(result):
                await result
        except Exception as exc:
            # The response goes out regardless of the hook outcome.
            self.logger.warning(
                "Problem hook failed",
                error_type=type(exc).__name__,
                error_message=str(exc),
                status=problem.status,
                instance=problem.instance,
            )
