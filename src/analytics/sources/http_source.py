"""
Order source fetching the demo carts endpoint over HTTP.
"""

import os
from http.client import HTTPException
from urllib.error import URLError
from urllib.request import Request, urlopen

from src.core.exceptions import OrderFetchError
from src.core.raw_order import RawOrder

from .base import BaseOrderSource


DEFAULT_ORDERS_URL = "https://dummyjson.com/carts"


class HttpOrderSource(BaseOrderSource):
    """
    One GET request against an order-listing endpoint.

    Args:
        url: Endpoint (defaults to env var ORDERS_URL or the demo carts API)
        timeout: Socket timeout in seconds (defaults to env var ORDERS_TIMEOUT or 10)
        opener: Callable with the ``urlopen`` signature; injectable for tests
    """

    name = "http"

    def __init__(self, url: str | None = None, timeout: float | None = None, opener=urlopen):
        self.url = url or os.getenv("ORDERS_URL", DEFAULT_ORDERS_URL)
        self.timeout = timeout or float(os.getenv("ORDERS_TIMEOUT", "10"))
        self.opener = opener

    def fetch(self) -> list[RawOrder]:
        try:
            request = Request(self.url, headers={"Accept": "application/json"})
            with self.opener(request, timeout=self.timeout) as response:
                data = response.read()
        except (URLError, HTTPException, OSError, ValueError) as e:
            raise OrderFetchError(self.name, f"GET {self.url} failed: {e}")
        return self.parse_payload(data)
