"""Error types and status mapping."""

from __future__ import annotations

from collections.abc import Mapping


def extract_error_message(payload: object) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    for key in ("error_message", "message", "error"):
        value = payload.get(key)
        if value is not None and str(value).strip() != "":
            return str(value)
    return None


class MozApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.http_status = http_status
        self.cause = cause


class MozConfigurationError(MozApiError):
    """Missing or incomplete credentials / configuration."""


class MozTypeError(MozApiError, TypeError):
    """Parameter of the wrong datatype."""


class MozValidationError(MozApiError, ValueError):
    """Parameter present but semantically invalid."""


class MozClientClosedError(MozApiError):
    """Raised when client is used after close."""


class MozTransportError(MozApiError):
    """Network/transport-level failure."""


class MozProtocolError(MozApiError):
    """Response body is not the expected JSON document."""


class MozRequestError(MozApiError):
    """Request rejected by the API (4xx)."""


class MozAuthenticationError(MozRequestError):
    """Signature or credentials rejected."""


class MozRateLimitError(MozRequestError):
    """Request throttled by the API."""


class MozServerError(MozApiError):
    """Server-side unexpected error."""


class MozDeprecatedFlagWarning(UserWarning):
    """A deprecated column flag was requested."""


def classify_http_error(
    payload: object,
    *,
    http_status: int | None,
) -> MozApiError | None:
    """Map HTTP status (and error body) to domain exceptions."""

    if http_status is None:
        return MozProtocolError("Missing HTTP status")
    if http_status < 400:
        return None

    message = extract_error_message(payload) or f"Linkscape request failed with HTTP {http_status}"
    if http_status in (401, 403):
        return MozAuthenticationError(message, http_status=http_status, cause="auth")
    if http_status == 429:
        return MozRateLimitError(message, http_status=http_status, cause="throttled")
    if http_status >= 500:
        return MozServerError(message, http_status=http_status, cause="server")
    return MozRequestError(message, http_status=http_status)


__all__ = [
    "MozApiError",
    "MozConfigurationError",
    "MozTypeError",
    "MozValidationError",
    "MozClientClosedError",
    "MozTransportError",
    "MozProtocolError",
    "MozRequestError",
    "MozAuthenticationError",
    "MozRateLimitError",
    "MozServerError",
    "MozDeprecatedFlagWarning",
    "extract_error_message",
    "classify_http_error",
]
