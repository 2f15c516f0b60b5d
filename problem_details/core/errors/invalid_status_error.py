"""Error raised when a status code cannot back a problem document.

Only 4xx and 5xx codes describe problems. Anything else reaching a document
constructor, the builder, the problem type registry or ``ProblemException`` is
a programming error in the calling application and is raised immediately,
never coerced to another status.
"""


class InvalidStatusError(ValueError):
    """Status code outside the 4xx/5xx problem range.

    Attributes:
        status: The rejected status value.
    """

    def __init__(self, status: object) -> None:
        super().__init__(f"Invalid status code: {status}. Must be 4xx or 5xx.")
        self.status = status
