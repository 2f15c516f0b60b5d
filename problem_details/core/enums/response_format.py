"""Wire formats a problem document can be rendered to."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Negotiated output format for a problem response."""

    JSON = "json"
    XML = "xml"
