"""
Exceptions raised across the sales statistics pipeline.
"""

from typing import Any


class InvalidRecordError(Exception):
    """Raised when a raw order cannot be normalized into an AnalyticRecord."""

    def __init__(self, record_id: Any, failed_rules: list[str], messages: list[str]):
        self.record_id = record_id
        self.failed_rules = failed_rules
        self.messages = messages
        super().__init__(f"Order {record_id!r} is invalid: {'; '.join(messages)}")


class OrderFetchError(Exception):
    """Raised when an order source cannot deliver raw orders."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")


class DataUnavailableError(RuntimeError):
    """Raised when a view is requested without successfully fetched data."""
