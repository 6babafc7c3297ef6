"""
HTML to plaintext conversion for rendered WordPress fields.

"""

from __future__ import annotations

import re
from typing import Any

from bs4 import BeautifulSoup


_PARAGRAPH_TAGS = ["p", "h1", "h2", "h3", "h4", "h5", "h6", "blockquote", "pre", "table"]
_LINE_TAGS = ["div", "li", "tr", "dt", "dd", "figcaption", "section", "article", "header", "footer"]
_DROPPED_TAGS = ["script", "style", "noscript", "template"]


def _safe_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def html_to_text(html: str) -> str:
    """
    Convert rendered HTML into plaintext:
    - drop script/style blocks
    - strip tags and decode entities
    - turn <br> and block ends into line breaks
    - collapse whitespace
    """
    s = _safe_text(html)
    if not s.strip():
        return ""

    soup = BeautifulSoup(s, "html.parser")

    for tag in soup.find_all(_DROPPED_TAGS):
        tag.decompose()
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for tag in soup.find_all(_PARAGRAPH_TAGS):
        tag.append("\n\n")
    for tag in soup.find_all(_LINE_TAGS):
        tag.append("\n")

    text = soup.get_text().replace("\xa0", " ")

    # Collapse whitespace
    text = re.sub(r"[ \t\r\f\v]+", " ", text)
    text = "\n".join(line.strip() for line in text.split("\n"))
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()
