"""Async endpoint client."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from typing import Protocol

from ..core.signature import Signature
from ..core.text import to_title_case
from .endpoint import Payload
from .request_shared import prepare_get_urls, prepare_post
from .schemas import EndpointSchema, get_schema
from .url_builder import DEFAULT_BASE_URL, UrlBuilder

logger = logging.getLogger("moz_linkscape")


class AsyncRequester(Protocol):
    async def request(self, method: str, url: str, *, body: Sequence[str] | None = None) -> Payload: ...


class AsyncMozEndpoint:
    """Async variant of ``MozEndpoint``; batched GETs run concurrently."""

    def __init__(
        self,
        kind: str,
        *,
        signature: Signature,
        transport: AsyncRequester,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self.schema: EndpointSchema = get_schema(kind)
        self._transport = transport
        self._builder = UrlBuilder(self.schema, signature, base_url=base_url)

    @property
    def kind(self) -> str:
        return self.schema.kind

    @property
    def name(self) -> str:
        return to_title_case(self.schema.kind.replace("-", " "))

    @property
    def url_builder(self) -> UrlBuilder:
        return self._builder

    async def get(
        self,
        targets: str | Sequence[str] | None = None,
        params: Mapping[str, object] | None = None,
    ) -> Payload | list[Payload]:
        # Validation failures raise before any request is issued.
        urls, is_batch = prepare_get_urls(self._builder, self.schema, targets, params)
        logger.debug("%s get targets=%s", self.name, len(urls))
        responses = await asyncio.gather(
            *(self._transport.request("GET", url) for url in urls)
        )
        return list(responses) if is_batch else responses[0]

    async def post(
        self,
        targets: Sequence[str],
        params: Mapping[str, object] | None = None,
    ) -> Payload:
        prepared = prepare_post(self._builder, self.schema, targets, params)
        logger.debug("%s post targets=%s", self.name, len(prepared.body))
        return await self._transport.request("POST", prepared.url, body=prepared.body)


__all__ = [
    "AsyncRequester",
    "AsyncMozEndpoint",
]
