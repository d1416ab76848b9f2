"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from collections.abc import Callable

from .config import MozClientConfig, MozCredentials
from .core.errors import MozConfigurationError
from .core.signature import Signature

ENDPOINT_ATTRIBUTES = {
    "url_metrics": "url-metrics",
    "links": "links",
    "anchor_text": "anchor-text",
    "top_pages": "top-pages",
    "metadata": "metadata",
}


def validate_client_config(config: MozClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise MozConfigurationError(str(exc)) from exc


def validate_credentials(credentials: MozCredentials | None) -> MozCredentials:
    if credentials is None:
        raise MozConfigurationError("credentials are required")
    if not isinstance(credentials, MozCredentials):
        raise MozConfigurationError("credentials must be MozCredentials")
    credentials.validate()
    return credentials


def build_signature(
    credentials: MozCredentials,
    config: MozClientConfig,
    clock: Callable[[], float] | None,
) -> Signature:
    signature = Signature(
        credentials.access_id,
        credentials.secret_key,
        expires_threshold=config.expires_threshold_seconds,
        clock=clock,
    )
    signature.generate()
    return signature


__all__ = [
    "ENDPOINT_ATTRIBUTES",
    "validate_client_config",
    "validate_credentials",
    "build_signature",
]
