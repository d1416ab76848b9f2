"""Public package exports for the Moz Linkscape API client."""

from .async_client import AsyncMozClient
from .client import MozClient
from .config import MozClientConfig, MozCredentials

__all__ = ["MozClient", "AsyncMozClient", "MozClientConfig", "MozCredentials"]
