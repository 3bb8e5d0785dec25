"""
Base classes for order sources.

A source performs the one-shot fetch of raw orders. Any failure surfaces
as OrderFetchError; sources never retry.
"""

import json
from abc import ABC, abstractmethod
from typing import Any

from src.core.exceptions import OrderFetchError
from src.core.raw_order import RawOrder


class BaseOrderSource(ABC):
    """Base class for sources that deliver raw order payloads."""

    name: str

    @abstractmethod
    def fetch(self) -> list[RawOrder]:
        """
        Fetch every raw order once.

        Raises:
            OrderFetchError: If the orders cannot be read or parsed
        """

    def parse_payload(self, data: bytes | str) -> list[RawOrder]:
        """
        Decode a JSON document holding orders.

        Accepts a bare list of orders or the ``{"carts": [...]}`` envelope
        returned by the demo carts API.
        """
        try:
            payload: Any = json.loads(data)
        except ValueError as e:
            raise OrderFetchError(self.name, f"Invalid JSON: {e}")

        if isinstance(payload, dict):
            if "carts" not in payload:
                raise OrderFetchError(self.name, "JSON object has no 'carts' list")
            payload = payload["carts"]

        if not isinstance(payload, list):
            raise OrderFetchError(self.name, f"Expected a list of orders, got {type(payload).__name__}")
        return payload

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
