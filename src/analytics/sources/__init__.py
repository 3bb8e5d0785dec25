"""
Sources delivering raw orders to the statistics session.
"""

from .base import BaseOrderSource
from .file_source import FileOrderSource
from .http_source import DEFAULT_ORDERS_URL, HttpOrderSource

__all__ = ["BaseOrderSource", "FileOrderSource", "HttpOrderSource", "DEFAULT_ORDERS_URL"]
