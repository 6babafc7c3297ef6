"""
Utility modules for the content client
"""
from .config_loader import ClientConfig, load_client_config, apply_env_overrides
from .log_sink import LoggingSink, RecordingSink
from .url import url_join, serialize_query, with_query

__all__ = [
    'ClientConfig',
    'load_client_config',
    'apply_env_overrides',
    'LoggingSink',
    'RecordingSink',
    'url_join',
    'serialize_query',
    'with_query',
]
