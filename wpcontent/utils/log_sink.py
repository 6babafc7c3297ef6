"""
Log sinks for the content client.
"""
import logging
from typing import List, Tuple

from wpcontent.integrations.contracts.interfaces import LogSink


class LoggingSink(LogSink):
    """Forward client diagnostics to the ``<namespace>.<category>`` stdlib logger."""

    def __init__(self, namespace: str = "wpcontent", level: int = logging.DEBUG):
        self.namespace = namespace
        self.level = level

    def log(self, category: str, message: str) -> None:
        logging.getLogger(f"{self.namespace}.{category}").log(self.level, message)


class RecordingSink(LogSink):
    """Keep every (category, message) pair in memory."""

    def __init__(self):
        self.records: List[Tuple[str, str]] = []

    def log(self, category: str, message: str) -> None:
        self.records.append((category, message))

    def messages(self, category: str) -> List[str]:
        return [message for cat, message in self.records if cat == category]
