"""
Async client for the WordPress REST API (posts and pages).
"""

from .integrations.clients.real_http import HttpxTransport, WordPressClient
from .integrations.contracts.interfaces import Collection, Item, Response

__all__ = ["WordPressClient", "HttpxTransport", "Collection", "Item", "Response"]
