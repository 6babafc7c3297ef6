"""
URL helpers: path joining and query-string serialization.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Tuple
from urllib.parse import quote, urlencode, urlsplit


def url_join(*segments: Any) -> str:
    """
    Join URL segments with exactly one slash between each pair.

    The first segment must be an absolute URL (scheme and host). A trailing
    slash on the last segment is kept.
    """
    if not segments:
        raise ValueError("url_join requires at least one segment")

    base = str(segments[0]).strip()
    parsed = urlsplit(base)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"Invalid base URL: {base!r}")

    pieces: List[str] = []
    last = len(segments) - 1
    for index, segment in enumerate(segments):
        part = str(segment)
        if index > 0:
            part = part.lstrip("/")
        if index < last:
            part = part.rstrip("/")
        if part:
            pieces.append(part)
    return "/".join(pieces)


def _scalar(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def serialize_query(params: Mapping[str, Any]) -> str:
    """
    Serialize a flat mapping as ``key=value&key2=value2`` in insertion order.

    None values are dropped, booleans become true/false and sequences repeat
    the key. Nested mappings are rejected with TypeError.
    """
    pairs: List[Tuple[str, Any]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            raise TypeError(f"Query parameter {key!r} must be a scalar or a sequence, got a mapping")
        if isinstance(value, (list, tuple, set, frozenset)):
            pairs.extend((key, _scalar(v)) for v in _ordered(value))
        else:
            pairs.append((key, _scalar(value)))
    return urlencode(pairs, safe="", quote_via=quote)


def _ordered(values: Iterable[Any]) -> Iterable[Any]:
    if isinstance(values, (set, frozenset)):
        return sorted(values, key=str)
    return values


def with_query(url: str, query: str) -> str:
    """Append a serialized query, using ``&`` when ``url`` already carries one."""
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"
