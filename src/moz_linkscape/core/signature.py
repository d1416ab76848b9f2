"""Time-boxed HMAC-SHA1 request signature."""

from __future__ import annotations

import base64
import hashlib
import hmac
import math
import time
from collections.abc import Callable

from .errors import MozTypeError, MozValidationError

DEFAULT_EXPIRES_THRESHOLD = 300


class Signature:
    """Signs ``access_id`` + expiry with the secret key.

    The signature does not depend on request content; it only binds the
    access id to an expiry timestamp. ``generate()`` caches both so the
    ``Expires`` value sent on the wire always matches the signed one.
    """

    def __init__(
        self,
        access_id: str,
        secret_key: str,
        *,
        expires_threshold: int = DEFAULT_EXPIRES_THRESHOLD,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._access_id = access_id
        self._secret_key = secret_key
        self._clock = clock or time.time
        self._expires_threshold = DEFAULT_EXPIRES_THRESHOLD
        self.set_expires_threshold(expires_threshold)
        self._last_expires: int | None = None
        self._last_signature: str | None = None

    @property
    def access_id(self) -> str:
        return self._access_id

    @property
    def expires_threshold(self) -> int:
        return self._expires_threshold

    @property
    def last_signature(self) -> str | None:
        return self._last_signature

    def set_expires_threshold(self, seconds: int = DEFAULT_EXPIRES_THRESHOLD) -> None:
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise MozTypeError("expires threshold must be an int", field="expires_threshold")
        if seconds < 0:
            raise MozValidationError("expires threshold must be >= 0", field="expires_threshold")
        self._expires_threshold = seconds

    def expires(self, threshold: int | None = None) -> int:
        """Return ``floor(now) + threshold`` without touching the cache."""

        if threshold is None:
            threshold = self._expires_threshold
        return math.floor(self._clock()) + threshold

    def get_expires(self) -> int | None:
        """Expiry bound into the last generated signature."""

        return self._last_expires

    def generate(self) -> str:
        expires = self.expires()
        string_to_sign = f"{self._access_id}\n{expires}"
        digest = hmac.new(
            self._secret_key.encode("utf-8"),
            string_to_sign.encode("utf-8"),
            hashlib.sha1,
        ).digest()
        signature = base64.b64encode(digest).decode("ascii")
        self._last_expires = expires
        self._last_signature = signature
        return signature


__all__ = [
    "DEFAULT_EXPIRES_THRESHOLD",
    "Signature",
]
