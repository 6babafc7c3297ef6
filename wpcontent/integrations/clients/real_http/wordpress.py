"""
WordPress REST API content client.

Purpose:
- Reads posts and pages from a WordPress installation (/wp-json/wp/v2/)
- Normalizes records into Item values and listings into Response values

Implementation notes:
- Each public call issues exactly one request through the transport
- Transport failures (non-2xx, timeouts, bad JSON) propagate unchanged
- A missing pagination header is reported as None, never coerced to zero

Documentation: https://developer.wordpress.org/rest-api/reference/
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from wpcontent.integrations.contracts.interfaces import (
    Collection,
    ContentTransport,
    Item,
    LogSink,
    Response,
)
from wpcontent.integrations.clients.real_http.transport import HttpxTransport
from wpcontent.integrations.policy.response_wrappers import normalize_item, parse_count_header
from wpcontent.utils.config_loader import ClientConfig
from wpcontent.utils.log_sink import LoggingSink
from wpcontent.utils.url import serialize_query, url_join, with_query

logger = logging.getLogger(__name__)

CollectionName = Union[Collection, str]


class WordPressClient:
    def __init__(
        self,
        base_url: str,
        *,
        transport: Optional[ContentTransport] = None,
        log_sink: Optional[LogSink] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        """
        Args:
            base_url: URL of the WordPress installation, e.g. https://wordpress.org/news
            transport: HTTP collaborator; defaults to HttpxTransport
            log_sink: receives outgoing URLs; defaults to LoggingSink
            config: client settings; defaults to ClientConfig()
        """
        self.config = config or ClientConfig()
        self.base_url = url_join(base_url, self.config.api_root)
        self.transport = transport or HttpxTransport(
            timeout_seconds=self.config.timeout_seconds,
            user_agent=self.config.user_agent,
        )
        self.log_sink = log_sink or LoggingSink()

    async def __aenter__(self) -> "WordPressClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.transport.aclose()

    # -- Generic endpoints --

    async def fetch_collection(
        self,
        name: CollectionName,
        /,
        page_size: Optional[int] = None,
        offset: int = 0,
        **options: Any,
    ) -> Response:
        """
        List one page of a collection.

        Extra keyword arguments are passed through verbatim as endpoint
        arguments (order, orderby, search, categories, ...). ``per_page`` and
        ``offset`` always carry the values computed here.
        """
        if page_size is None:
            page_size = self.config.default_page_size

        query: Dict[str, Any] = {**options, "per_page": page_size, "offset": offset}
        url = with_query(url_join(self.base_url, _collection(name)), serialize_query(query))
        self.log_sink.log("http", f"url: {url}")

        result = await self.transport.get(url, json=True)
        body = result.body if result.body is not None else []

        total = self._parse_header(result.headers, self.config.total_header, url)
        total_pages = self._parse_header(result.headers, self.config.total_pages_header, url)
        items = [normalize_item(record) for record in body]

        return Response(total=total, total_pages=total_pages, page_size=page_size, items=items)

    async def fetch_item(self, item_id: Union[int, str], name: CollectionName) -> Item:
        url = url_join(self.base_url, _collection(name), str(item_id))
        self.log_sink.log("http", f"url: {url}")

        result = await self.transport.get(url, json=True)
        record = result.body if result.body is not None else {}
        return normalize_item(record)

    async def count_items(self, name: CollectionName, /, **options: Any) -> Optional[int]:
        """Return the total item count from a HEAD request, without fetching bodies."""
        url = with_query(url_join(self.base_url, _collection(name)), serialize_query(options))
        self.log_sink.log("http", f"url: {url}")

        result = await self.transport.head(url)
        return self._parse_header(result.headers, self.config.total_header, url)

    # -- Posts --

    async def fetch_posts(self, /, page_size: Optional[int] = None, offset: int = 0, **options: Any) -> Response:
        """List posts. See https://developer.wordpress.org/rest-api/reference/posts/#arguments"""
        return await self.fetch_collection(Collection.POSTS, page_size=page_size, offset=offset, **options)

    async def fetch_post(self, item_id: Union[int, str]) -> Item:
        return await self.fetch_item(item_id, Collection.POSTS)

    async def count_posts(self, /, **options: Any) -> Optional[int]:
        return await self.count_items(Collection.POSTS, **options)

    # -- Pages --

    async def fetch_pages(self, /, page_size: Optional[int] = None, offset: int = 0, **options: Any) -> Response:
        """List pages. See https://developer.wordpress.org/rest-api/reference/pages/#arguments"""
        return await self.fetch_collection(Collection.PAGES, page_size=page_size, offset=offset, **options)

    async def fetch_page(self, item_id: Union[int, str]) -> Item:
        return await self.fetch_item(item_id, Collection.PAGES)

    async def count_pages(self, /, **options: Any) -> Optional[int]:
        return await self.count_items(Collection.PAGES, **options)

    def _parse_header(self, headers: Dict[str, str], name: str, url: str) -> Optional[int]:
        value = parse_count_header(headers, name)
        if value is None:
            message = f"missing or non-numeric {name} header for {url}"
            logger.warning(message)
            self.log_sink.log("pagination", message)
        return value


def _collection(name: CollectionName) -> str:
    return name.value if isinstance(name, Collection) else str(name)
