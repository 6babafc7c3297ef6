"""
Mock integration transports.

These transports return fake (but realistic) WordPress responses without calling any external site.
They are used when:
- No WordPress installation is reachable
- We want to test the client end-to-end without network access

Important:
- Mock transports must follow the SAME interface as the real HTTP transport.
- Responses should be shaped the way /wp-json/wp/v2/ returns them.
"""

from .fixture_transport import FixtureTransport, make_record

__all__ = ["FixtureTransport", "make_record"]
