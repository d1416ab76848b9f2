"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from types import TracebackType

from .client_shared import (
    ENDPOINT_ATTRIBUTES,
    build_signature,
    validate_client_config,
    validate_credentials,
)
from .config import MozClientConfig, MozCredentials
from .core.errors import MozClientClosedError
from .core.explain import explain
from .core.flags import BIT_FLAGS
from .core.signature import DEFAULT_EXPIRES_THRESHOLD
from .core.transport import SyncTransport
from .endpoints.endpoint import MozEndpoint, Payload, SyncRequester
from .endpoints.schemas import EndpointSchema


class _GuardedEndpoint:
    """Guard wrapper to block usage after client close."""

    def __init__(self, owner: "MozClient", delegate: MozEndpoint) -> None:
        self._owner = owner
        self._delegate = delegate

    @property
    def kind(self) -> str:
        return self._delegate.kind

    @property
    def schema(self) -> EndpointSchema:
        return self._delegate.schema

    def get(
        self,
        targets: str | Sequence[str] | None = None,
        params: Mapping[str, object] | None = None,
    ) -> Payload | list[Payload]:
        self._owner._ensure_open()
        return self._delegate.get(targets, params)

    def post(
        self,
        targets: Sequence[str],
        params: Mapping[str, object] | None = None,
    ) -> Payload:
        self._owner._ensure_open()
        return self._delegate.post(targets, params)


class MozClient:
    """Public Linkscape API client."""

    def __init__(
        self,
        credentials: MozCredentials | None = None,
        *,
        config: MozClientConfig | None = None,
        transport: SyncRequester | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._credentials = validate_credentials(credentials)
        self.config = config or MozClientConfig()
        validate_client_config(self.config)

        self._transport = transport or SyncTransport(self.config)
        self.signature = build_signature(self._credentials, self.config, clock)
        self.bit_flags = BIT_FLAGS
        self._closed = False

        for attribute, kind in ENDPOINT_ATTRIBUTES.items():
            endpoint = MozEndpoint(
                kind,
                signature=self.signature,
                transport=self._transport,
                base_url=self.config.base_url,
            )
            setattr(self, attribute, _GuardedEndpoint(self, endpoint))

    def set_expires(self, threshold: int = DEFAULT_EXPIRES_THRESHOLD) -> None:
        self.signature.set_expires_threshold(threshold)

    def explain(self, code: str) -> str:
        return explain(code)

    def _ensure_open(self) -> None:
        if self._closed:
            raise MozClientClosedError("MozClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        if hasattr(self._transport, "close"):
            self._transport.close()
        self._closed = True

    def __enter__(self) -> "MozClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "MozClient",
]
