"""Shared response parsing helpers for sync/async transports."""

from __future__ import annotations

from typing import Protocol

from .errors import (
    MozApiError,
    MozProtocolError,
    MozRequestError,
    MozServerError,
)


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> dict[str, object] | list[object]:
    """Parse response JSON payload and map parse failures to domain errors.

    Single-target requests answer with an object, batched POST requests
    with an array of objects.
    """

    try:
        payload = response.json()
    except Exception as exc:
        raise _json_parse_error(http_status=http_status) from exc

    if isinstance(payload, dict):
        if any(not isinstance(key, str) for key in payload):
            raise MozProtocolError(
                "response JSON object keys must be strings",
                http_status=http_status,
            )
        return payload
    if isinstance(payload, list):
        return payload
    raise MozProtocolError(
        "response JSON root must be an object or array",
        http_status=http_status,
    )


def _json_parse_error(*, http_status: int | None) -> MozApiError:
    message = "response body is not valid JSON"
    if http_status is not None and http_status >= 500:
        return MozServerError(message, http_status=http_status, cause="server")
    if http_status is not None and http_status >= 400:
        return MozRequestError(message, http_status=http_status)
    return MozProtocolError(message, http_status=http_status)


__all__ = [
    "parse_json_payload",
]
