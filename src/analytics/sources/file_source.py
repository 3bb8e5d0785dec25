"""
Order source reading a JSON file from disk.
"""

from pathlib import Path

from src.core.exceptions import OrderFetchError
from src.core.raw_order import RawOrder

from .base import BaseOrderSource


class FileOrderSource(BaseOrderSource):
    """Reads orders from a local JSON file (list or carts envelope)."""

    name = "file"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fetch(self) -> list[RawOrder]:
        try:
            data = self.path.read_bytes()
        except OSError as e:
            raise OrderFetchError(self.name, f"Cannot read {self.path}: {e}")
        return self.parse_payload(data)
