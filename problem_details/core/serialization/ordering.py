"""Member ordering shared by the JSON and XML renderers."""

from collections.abc import Iterator, Mapping
from typing import Any, Protocol, TypeAlias

from problem_details.core.constants import RESERVED_FIELDS
from problem_details.core.types import JsonValue


class SupportsProblemDict(Protocol):
    """Anything that can hand out its problem members as a mapping."""

    def to_dict(self) -> dict[str, JsonValue]: ...


ProblemLike: TypeAlias = SupportsProblemDict | Mapping[str, Any]


def ordered_members(problem: ProblemLike) -> Iterator[tuple[str, Any]]:
    """Yield present members as (name, value) pairs in wire order.

    Reserved members come first in ``RESERVED_FIELDS`` order, followed by
    every other member in insertion order. Members whose value is None are
    absent and skipped.

    Args:
        problem: A problem document or a plain mapping of members.

    Yields:
        tuple[str, Any]: Member name and value.
    """
    members = problem if isinstance(problem, Mapping) else problem.to_dict()
    for name in RESERVED_FIELDS:
        value = members.get(name)
        if value is not None:
            yield name, value
    for name, value in members.items():
        if name not in RESERVED_FIELDS and value is not None:
            yield name, value
