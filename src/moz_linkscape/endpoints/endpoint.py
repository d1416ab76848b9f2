"""Sync endpoint client."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Protocol

from ..core.signature import Signature
from ..core.text import to_title_case
from .request_shared import prepare_get_urls, prepare_post
from .schemas import EndpointSchema, get_schema
from .url_builder import DEFAULT_BASE_URL, UrlBuilder

logger = logging.getLogger("moz_linkscape")

Payload = dict[str, object] | list[object]


class SyncRequester(Protocol):
    def request(self, method: str, url: str, *, body: Sequence[str] | None = None) -> Payload: ...


class MozEndpoint:
    """One Linkscape endpoint kind, configured by its schema."""

    def __init__(
        self,
        kind: str,
        *,
        signature: Signature,
        transport: SyncRequester,
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

    def get(
        self,
        targets: str | Sequence[str] | None = None,
        params: Mapping[str, object] | None = None,
    ) -> Payload | list[Payload]:
        """GET one url per target; a list of targets yields a list of payloads."""

        urls, is_batch = prepare_get_urls(self._builder, self.schema, targets, params)
        logger.debug("%s get targets=%s", self.name, len(urls))
        responses = [self._transport.request("GET", url) for url in urls]
        return responses if is_batch else responses[0]

    def post(
        self,
        targets: Sequence[str],
        params: Mapping[str, object] | None = None,
    ) -> Payload:
        """POST the target list to a single signed url."""

        prepared = prepare_post(self._builder, self.schema, targets, params)
        logger.debug("%s post targets=%s", self.name, len(prepared.body))
        return self._transport.request("POST", prepared.url, body=prepared.body)


__all__ = [
    "Payload",
    "SyncRequester",
    "MozEndpoint",
]
