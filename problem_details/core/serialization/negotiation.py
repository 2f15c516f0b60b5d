"""Accept header negotiation between problem+json and problem+xml.

JSON is the default and the only format unless XML support is enabled. With
XML enabled, the Accept header is read as ``type;q=value`` segments, ordered
by descending quality (ties keep header order), and the first recognised
media type decides the format.
"""

from dataclasses import dataclass

from problem_details.core.enums import ResponseFormat

XML_MEDIA_TYPES = frozenset({"application/problem+xml", "application/xml"})
JSON_MEDIA_TYPES = frozenset({"application/problem+json", "application/json", "*/*"})


@dataclass(frozen=True, slots=True)
class MediaRange:
    """One Accept header segment."""

    media_type: str
    quality: float = 1.0


def _parse_quality(raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        return 0.0


def parse_accept_header(accept: str) -> list[MediaRange]:
    """Parse an Accept header into media ranges ordered by preference.

    Args:
        accept: Raw Accept header value.

    Returns:
        list[MediaRange]: Ranges sorted by descending quality. The sort is
        stable, so equal qualities keep their header order. A segment
        without ``q`` has quality 1.0; an unparseable ``q`` counts as 0.

    Example:
        >>> parse_accept_header("application/json;q=0.5, application/xml")
        [MediaRange(media_type='application/xml', quality=1.0), MediaRange(media_type='application/json', quality=0.5)]
    """
    ranges: list[MediaRange] = []
    for segment in accept.split(","):
        media_type, *params = segment.strip().split(";")
        quality = 1.0
        for param in params:
            key, _, value = param.strip().partition("=")
            if key.strip() == "q" and value.strip():
                quality = _parse_quality(value.strip())
        ranges.append(MediaRange(media_type=media_type.strip().lower(), quality=quality))
    return sorted(ranges, key=lambda media_range: -media_range.quality)


def negotiate_content_type(accept: str | None, support_xml: bool) -> ResponseFormat:
    """Select the problem response format for an Accept header.

    Args:
        accept: Raw Accept header value, None when the request has none.
        support_xml: Whether XML output is enabled.

    Returns:
        ResponseFormat: XML only when enabled and preferred, JSON otherwise.

    Example:
        >>> negotiate_content_type("application/problem+json;q=0.5, application/problem+xml;q=0.9", True)
        <ResponseFormat.XML: 'xml'>
    """
    if not accept or not support_xml:
        return ResponseFormat.JSON

    for media_range in parse_accept_header(accept):
        if media_range.media_type in XML_MEDIA_TYPES:
            return ResponseFormat.XML
        if media_range.media_type in JSON_MEDIA_TYPES:
            return ResponseFormat.JSON

    return ResponseFormat.JSON
