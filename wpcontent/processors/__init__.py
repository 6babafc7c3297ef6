"""
Processors package.

Processing turns rendered WordPress HTML into the plaintext exposed on Item fields.
"""

from .html_text import html_to_text

__all__ = ["html_to_text"]
