"""Async HTTP transport with status evaluation."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

import httpx

from ..config import MozClientConfig
from .errors import MozApiError, MozTransportError, classify_http_error
from .response_parsing import parse_json_payload
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    normalize_method,
    redact_url,
)

logger = logging.getLogger("moz_linkscape")


class AsyncTransportClient(Protocol):
    async def request(self, method: str, url: str, **kwargs: object) -> object: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for the Linkscape API."""

    def __init__(
        self,
        config: MozClientConfig,
        *,
        client: AsyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def request(
        self,
        method: str,
        url: str,
        *,
        body: Sequence[str] | None = None,
    ) -> dict[str, object] | list[object]:
        if self._closed:
            raise MozTransportError("transport is already closed")

        normalized_method = normalize_method(method)
        log_url = redact_url(url)
        logger.debug("request start method=%s url=%s", normalized_method, log_url)

        kwargs: dict[str, object] = {}
        if body is not None:
            kwargs["json"] = list(body)
        try:
            response = await self._client.request(normalized_method, url, **kwargs)
        except Exception as exc:
            logger.error(
                "request network error method=%s url=%s error=%s",
                normalized_method,
                log_url,
                exc.__class__.__name__,
            )
            raise MozTransportError("network/transport error", cause="network") from exc

        http_status = getattr(response, "status_code", None)
        logger.debug(
            "response received method=%s url=%s http_status=%s",
            normalized_method,
            log_url,
            http_status,
        )
        try:
            payload = parse_json_payload(response, http_status=http_status)
        except MozApiError:
            logger.error(
                "response parse error method=%s url=%s http_status=%s",
                normalized_method,
                log_url,
                http_status,
            )
            raise

        mapped_error = classify_http_error(payload, http_status=http_status)
        if mapped_error is not None:
            logger.error(
                "request failed method=%s url=%s http_status=%s",
                normalized_method,
                log_url,
                http_status,
            )
            raise mapped_error

        logger.info("request success method=%s url=%s", normalized_method, log_url)
        return payload


__all__ = [
    "AsyncTransport",
]
