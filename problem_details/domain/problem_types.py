"""Registry of named problem types.

A problem type binds a short symbolic name (``insufficient-funds``) to a
status, a title and a type URI, so call sites can refer to the name instead
of repeating the URI. The type URI is resolved once, at registration:
``<base_url>/<name>`` when a base URL is configured, ``about:blank``
otherwise. Changing the base URL later does not touch existing entries.

Registration is expected during application setup, but it is safe during
live traffic: writers are serialized by a lock and publish a new read-only
snapshot, readers only ever see a complete snapshot.

Usage:
    registry = ProblemTypeRegistry(base_url="https://api.example.com/errors")
    registry.register("insufficient-funds", status=403, title="Insufficient Funds")

    entry = registry.resolve("insufficient-funds")
    if entry is not None:
        entry.type  # 'https://api.example.com/errors/insufficient-funds'
"""

import threading
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from problem_details.core.constants import ABOUT_BLANK
from problem_details.domain.status_metadata import check_problem_status


@dataclass(frozen=True, slots=True, kw_only=True)
class ProblemType:
    """Resolved problem type entry.

    Attributes:
        name: Symbolic name used at call sites.
        status: Status code the type is meant for.
        title: Default title for documents of this type.
        type: Resolved type URI.
    """

    name: str
    status: int
    title: str
    type: str


class ProblemTypeRegistry:
    """Process-wide table of named problem types.

    Args:
        base_url: Prefix for type URIs of entries registered without one.
    """

    def __init__(self, base_url: str | None = None) -> None:
        self._base_url = base_url.rstrip("/") if base_url else None
        self._lock = threading.Lock()
        self._types: Mapping[str, ProblemType] = MappingProxyType({})

    @property
    def base_url(self) -> str | None:
        """Prefix applied to future registrations."""
        return self._base_url

    @base_url.setter
    def base_url(self, value: str | None) -> None:
        self._base_url = value.rstrip("/") if value else None

    def register(
        self,
        name: str,
        *,
        status: int,
        title: str,
        type: str | None = None,
    ) -> ProblemType:
        """Register (or replace) a named problem type.

        Args:
            name: Symbolic name.
            status: Status code for the type (4xx/5xx).
            title: Human-readable title.
            type: Explicit type URI; resolved from the base URL when omitted.

        Returns:
            ProblemType: The stored entry.

        Raises:
            InvalidStatusError: If status is not a 4xx/5xx code.
        """
        check_problem_status(status)

        if not type:
            type = f"{self._base_url}/{name}" if self._base_url else ABOUT_BLANK
        entry = ProblemType(name=name, status=status, title=title, type=type)

        with self._lock:
            updated = dict(self._types)
            updated[name] = entry
            self._types = MappingProxyType(updated)
        return entry

    def resolve(self, name: str) -> ProblemType | None:
        """Look up a registered type; None when the name is unknown."""
        return self._types.get(name)

    def names(self) -> list[str]:
        """Return registered names in registration order."""
        return list(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)
