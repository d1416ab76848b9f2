"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlsplit

import httpx

from ..config import MozClientConfig
from .errors import MozValidationError

SUPPORTED_METHODS = ("GET", "POST")


def build_default_headers(config: MozClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: MozClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def normalize_method(method: str) -> str:
    normalized = method.upper()
    if normalized not in SUPPORTED_METHODS:
        raise MozValidationError(f"Unsupported HTTP method: {method}", field="method")
    return normalized


def redact_url(url: str) -> str:
    """Drop the signed query string before logging."""

    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}" if parts.scheme else parts.path


__all__ = [
    "SUPPORTED_METHODS",
    "build_default_headers",
    "build_default_timeout",
    "normalize_method",
    "redact_url",
]
