"""Shared type aliases.

``JsonValue`` is the recursive value model for extension members: scalars,
sequences and string-keyed mappings, nested to any depth. Both renderers walk
it with one branch per variant.
"""

from collections.abc import Mapping, Sequence
from typing import TypeAlias

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | Sequence["JsonValue"] | Mapping[str, "JsonValue"]
