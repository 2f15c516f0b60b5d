"""FastAPI dependencies for problem responses.

Usage:
    from fastapi import Depends

    @app.get("/users/{user_id}")
    async def get_user(
        user_id: int,
        request: Request,
        responder: ProblemResponder = Depends(get_problem_responder),
    ):
        return await responder.problem(request, 404, detail=f"User {user_id} not found")
"""

from starlette.requests import Request

from problem_details.presentation.api.problem_responder import STATE_KEY, ProblemResponder


def get_problem_responder(request: Request) -> ProblemResponder:
    """Return the responder installed on the current application.

    Raises:
        RuntimeError: If ``ProblemResponder.install`` was never called.
    """
    responder = getattr(request.app.state, STATE_KEY, None)
    if responder is None:
        raise RuntimeError("ProblemResponder is not installed on this application")
    return responder
