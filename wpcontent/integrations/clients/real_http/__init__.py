"""
Real HTTP integration clients.

These clients communicate with a live WordPress installation over HTTP:
- HttpxTransport performs the GET / HEAD requests
- WordPressClient builds request URLs and shapes responses into contracts

Important:
- The transport must implement the same interface as the fixture transport
- Clients must return data shaped according to wpcontent/integrations/contracts/*
"""

from .transport import HttpxTransport
from .wordpress import WordPressClient

__all__ = ["HttpxTransport", "WordPressClient"]
