from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wpcontent.integrations.contracts.interfaces import Item

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Any] = None) -> None:
        super().__init__(message)
        self.payload = payload if payload is not None else {}


class RenderedFieldModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    rendered: str = ""


class ContentRecordModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    date: Optional[str] = None
    modified: Optional[str] = None
    link: Optional[str] = None
    title: RenderedFieldModel = Field(default_factory=RenderedFieldModel)
    excerpt: RenderedFieldModel = Field(default_factory=RenderedFieldModel)
    content: RenderedFieldModel = Field(default_factory=RenderedFieldModel)


def normalize_link(link: Optional[str]) -> Optional[str]:
    """Strip exactly one trailing slash."""
    if link is None:
        return None
    return link[:-1] if link.endswith("/") else link


def normalize_item(raw: Any) -> Item:
    if not isinstance(raw, Mapping):
        raise IntegrationResponseError(
            f"Expected a JSON object for a content record; got {type(raw).__name__}.",
            payload=raw,
        )

    record = _build_model(ContentRecordModel, dict(raw), raw)

    return Item(
        id=record.id,
        created_at=record.date,
        modified_at=record.modified,
        link=normalize_link(record.link),
        title_html=record.title.rendered,
        excerpt_html=record.excerpt.rendered,
        content_html=record.content.rendered,
    )


def parse_count_header(headers: Mapping[str, str], name: str) -> Optional[int]:
    """
    Parse a pagination header as a base-10 integer from its leading digits
    ("512" and "512abc" both give 512).

    Returns None when the header is absent or does not start with a number;
    callers decide how to surface that.
    """
    value = headers.get(name.lower())
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(0), 10)


def _build_model(model_type, payload: Dict[str, Any], raw: Any):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Response validation failed: {exc}", payload=raw) from exc
