"""
Configuration loader for the WordPress content client
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "client_config.yml"


class ClientConfig(BaseModel):
    """Content client configuration"""

    api_root: str = "/wp-json/wp/v2/"
    default_page_size: int = Field(default=10, ge=1, le=100)
    timeout_seconds: float = Field(default=20.0, gt=0.0)
    user_agent: str = "wpcontent/0.1 (+https://developer.wordpress.org/rest-api/)"
    total_header: str = "x-wp-total"
    total_pages_header: str = "x-wp-totalpages"


def load_client_config(config_path: Optional[Path] = None) -> ClientConfig:
    """
    Load and validate client configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to config/client_config.yml

    Returns:
        Validated ClientConfig object; defaults when the file doesn't exist

    Raises:
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        logger.info("Client config not found at %s, using defaults", config_path)
        return ClientConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = ClientConfig(**data.get("client", data))
        logger.info("Successfully loaded client config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Client config validation failed: %s", e)
        raise


def apply_env_overrides(config: ClientConfig) -> ClientConfig:
    """Return a copy of ``config`` with WPCONTENT_* environment variables applied."""
    updates = {}
    if os.getenv("WPCONTENT_API_ROOT"):
        updates["api_root"] = os.environ["WPCONTENT_API_ROOT"]
    if os.getenv("WPCONTENT_PAGE_SIZE"):
        updates["default_page_size"] = os.environ["WPCONTENT_PAGE_SIZE"]
    if os.getenv("WPCONTENT_TIMEOUT"):
        updates["timeout_seconds"] = os.environ["WPCONTENT_TIMEOUT"]
    if os.getenv("WPCONTENT_USER_AGENT"):
        updates["user_agent"] = os.environ["WPCONTENT_USER_AGENT"]

    if not updates:
        return config
    try:
        return ClientConfig(**{**config.model_dump(), **updates})
    except ValidationError as e:
        logger.error("Invalid WPCONTENT_* environment override: %s", e)
        raise
