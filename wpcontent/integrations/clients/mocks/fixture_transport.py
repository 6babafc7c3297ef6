"""
WordPress fixture transport: MOCK.

⚠️  Serves posts and pages from memory instead of a live installation.
    Used for development and tests; swap in HttpxTransport for real sites.
    Behaves like the /wp-json/wp/v2/ endpoints the client relies on:
    per_page / offset / order, X-WP-Total / X-WP-TotalPages headers,
    404 for unknown ids, HEAD without a body, ?rest_route= routing.
"""

import asyncio
import logging
import math
from typing import Any, Dict, Iterable, List, Optional, Tuple

import httpx

from wpcontent.integrations.contracts.interfaces import ContentTransport, TransportResponse

logger = logging.getLogger(__name__)


def make_record(
    item_id: int,
    *,
    title: str = "",
    excerpt: str = "",
    content: str = "",
    link: Optional[str] = None,
    date: str = "2020-01-01T00:00:00",
    modified: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a record shaped like the WordPress REST API returns it."""
    return {
        "id": item_id,
        "date": date,
        "modified": modified or date,
        "link": link if link is not None else f"https://example.org/?p={item_id}",
        "title": {"rendered": title},
        "excerpt": {"rendered": excerpt, "protected": False},
        "content": {"rendered": content, "protected": False},
        "status": "publish",
    }


class FixtureTransport(ContentTransport):
    def __init__(
        self,
        collections: Optional[Dict[str, Iterable[Dict[str, Any]]]] = None,
        *,
        pagination_headers: bool = True,
        latencies: Optional[Dict[int, float]] = None,
    ) -> None:
        """
        Args:
            collections: records per collection name, e.g. {"posts": [...], "pages": [...]}
            pagination_headers: send X-WP-Total / X-WP-TotalPages on listings
            latencies: per-item-id delay in seconds before answering
        """
        self.collections: Dict[str, List[Dict[str, Any]]] = {
            name: list(records) for name, records in (collections or {}).items()
        }
        self.pagination_headers = pagination_headers
        self.latencies = latencies or {}
        self.requests: List[Tuple[str, str]] = []

    async def get(self, url: str, *, json: bool = True) -> TransportResponse:
        self.requests.append(("GET", url))
        collection, item_id, params = self._route(url)

        if item_id is not None:
            record = self._find(collection, item_id, "GET", url)
            delay = self.latencies.get(item_id, 0.0)
            if delay:
                await asyncio.sleep(delay)
            return TransportResponse(status_code=200, headers={}, body=record)

        records, headers = self._list(collection, params, "GET", url)
        return TransportResponse(status_code=200, headers=headers, body=records)

    async def head(self, url: str) -> TransportResponse:
        self.requests.append(("HEAD", url))
        collection, item_id, params = self._route(url)
        if item_id is not None:
            self._find(collection, item_id, "HEAD", url)
            return TransportResponse(status_code=200, headers={})
        _, headers = self._list(collection, params, "HEAD", url)
        return TransportResponse(status_code=200, headers=headers)

    # -- Routing --

    @staticmethod
    def _route(url: str) -> Tuple[str, Optional[int], httpx.QueryParams]:
        parsed = httpx.URL(url)
        # /index.php?rest_route=/wp/v2/posts form, for sites without pretty permalinks
        path = parsed.params.get("rest_route") or parsed.path
        parts = [part for part in path.split("/") if part]
        if parts and parts[-1].isdigit():
            return parts[-2], int(parts[-1]), parsed.params
        return parts[-1], None, parsed.params

    def _records(self, collection: str, method: str, url: str) -> List[Dict[str, Any]]:
        if collection not in self.collections:
            _raise_status(404, method, url, {"code": "rest_no_route", "message": "No route was found."})
        return self.collections[collection]

    def _find(self, collection: str, item_id: int, method: str, url: str) -> Dict[str, Any]:
        for record in self._records(collection, method, url):
            if record.get("id") == item_id:
                return record
        _raise_status(404, method, url, {"code": "rest_post_invalid_id", "message": "Invalid post ID."})

    def _list(
        self, collection: str, params: httpx.QueryParams, method: str, url: str
    ) -> Tuple[List[Dict[str, Any]], Dict[str, str]]:
        records = self._records(collection, method, url)
        try:
            per_page = int(params.get("per_page", "10"))
            offset = int(params.get("offset", "0"))
        except ValueError:
            _raise_status(400, method, url, {"code": "rest_invalid_param", "message": "Invalid parameter(s)."})
        if not 1 <= per_page <= 100:
            _raise_status(400, method, url, {"code": "rest_invalid_param", "message": "Invalid parameter(s): per_page"})

        ordered = sorted(records, key=lambda r: (r.get("date") or "", r.get("id") or 0))
        if params.get("order", "desc") != "asc":
            ordered.reverse()

        total = len(ordered)
        headers: Dict[str, str] = {}
        if self.pagination_headers:
            headers = {
                "x-wp-total": str(total),
                "x-wp-totalpages": str(math.ceil(total / per_page)),
            }
        logger.debug("[MOCK] %s %s -> %d records", method, url, total)
        return ordered[offset:offset + per_page], headers


def _raise_status(status_code: int, method: str, url: str, payload: Dict[str, Any]) -> None:
    request = httpx.Request(method, url)
    httpx.Response(status_code, request=request, json=payload).raise_for_status()
