from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Any, Dict, List, Optional

from wpcontent.processors.html_text import html_to_text


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Collection(str, Enum):
    POSTS = "posts"
    PAGES = "pages"


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Item:
    """A post or a page, normalized from a WordPress REST record.

    ``title``, ``excerpt`` and ``content`` are plaintext, converted from the
    rendered HTML on first access and memoized. The original markup stays
    reachable through the ``*_html`` fields.
    """
    id: Optional[int]
    created_at: Optional[str]            # remote `date`, kept opaque
    modified_at: Optional[str]           # remote `modified`, kept opaque
    link: Optional[str]                  # at most one trailing slash stripped
    title_html: str = field(default="", repr=False)
    excerpt_html: str = field(default="", repr=False)
    content_html: str = field(default="", repr=False)

    @cached_property
    def title(self) -> str:
        return html_to_text(self.title_html)

    @cached_property
    def excerpt(self) -> str:
        return html_to_text(self.excerpt_html)

    @cached_property
    def content(self) -> str:
        return html_to_text(self.content_html)


@dataclass(frozen=True)
class Response:
    """One page of a paginated listing."""
    total: Optional[int]                 # None when the total header is missing
    total_pages: Optional[int]
    page_size: int
    items: List[Item] = field(default_factory=list)


@dataclass
class TransportResponse:
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)   # lower-cased keys
    body: Any = None


# ---------------------------------------------------------------------------
# Abstract collaborator interfaces
# ---------------------------------------------------------------------------

class ContentTransport(ABC):
    """Every HTTP transport used by the content client must implement this interface."""

    @abstractmethod
    async def get(self, url: str, *, json: bool = True) -> TransportResponse:
        """Perform a GET and parse the body as JSON when ``json`` is set."""

    @abstractmethod
    async def head(self, url: str) -> TransportResponse:
        """Perform a HEAD; the body is discarded."""

    async def aclose(self) -> None:
        """Release any resources held by the transport."""


class LogSink(ABC):
    """Receives diagnostic messages from the content client."""

    @abstractmethod
    def log(self, category: str, message: str) -> None:
        """Record ``message`` under ``category``."""
