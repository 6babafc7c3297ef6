from .response_wrappers import (
    IntegrationResponseError,
    normalize_item,
    normalize_link,
    parse_count_header,
)

__all__ = ["IntegrationResponseError", "normalize_item", "normalize_link", "parse_count_header"]
