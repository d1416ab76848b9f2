from __future__ import annotations

import time

import pytest

from moz_linkscape.core.errors import MozTypeError, MozValidationError
from moz_linkscape.core.signature import DEFAULT_EXPIRES_THRESHOLD, Signature
from tests.shared.client_fakes import (
    ACCESS_ID,
    FROZEN_NOW,
    SECRET_KEY,
    FrozenClock,
    expected_expires,
    expected_signature,
)


def _signature(clock=None, **kwargs) -> Signature:
    return Signature(ACCESS_ID, SECRET_KEY, clock=clock, **kwargs)


def test_generate_returns_base64_string():
    assert isinstance(_signature().generate(), str)


def test_generate_matches_hmac_sha1_under_frozen_clock(frozen_clock: FrozenClock):
    signature = _signature(frozen_clock)
    assert signature.generate() == expected_signature(expected_expires())
    assert signature.last_signature == expected_signature(expected_expires())


@pytest.mark.parametrize("threshold", [1, 300, 86400])
def test_expires_is_after_current_time(threshold: int):
    before = int(time.time())
    expires = _signature().expires(threshold)
    assert expires >= before + threshold
    assert expires > before


def test_expires_floors_fractional_seconds(frozen_clock: FrozenClock):
    assert _signature(frozen_clock).expires(300) == 1330688329 + 300


def test_expires_does_not_touch_cache(frozen_clock: FrozenClock):
    signature = _signature(frozen_clock)
    signature.expires(10)
    assert signature.get_expires() is None


def test_get_expires_matches_generation_time(frozen_clock: FrozenClock):
    signature = _signature(frozen_clock)
    signature.generate()
    assert signature.get_expires() == signature.expires(300)


def test_regenerating_updates_signature_and_expiry_together(frozen_clock: FrozenClock):
    signature = _signature(frozen_clock)
    first = signature.generate()
    frozen_clock.now = FROZEN_NOW + 60
    second = signature.generate()

    assert second != first
    assert signature.get_expires() == expected_expires(FROZEN_NOW + 60)
    assert second == expected_signature(signature.get_expires())


def test_set_expires_threshold_and_reset_to_default(frozen_clock: FrozenClock):
    signature = _signature(frozen_clock)
    signature.set_expires_threshold(1000)
    assert signature.expires_threshold == 1000
    assert signature.expires() == expected_expires(threshold=1000)

    signature.set_expires_threshold()
    assert signature.expires_threshold == DEFAULT_EXPIRES_THRESHOLD


@pytest.mark.parametrize("seconds", ["500", 1.5, True, None])
def test_set_expires_threshold_rejects_non_int(frozen_clock: FrozenClock, seconds):
    signature = _signature(frozen_clock)
    with pytest.raises(MozTypeError, match="expires threshold must be an int"):
        signature.set_expires_threshold(seconds)
    assert signature.expires_threshold == DEFAULT_EXPIRES_THRESHOLD


def test_set_expires_threshold_rejects_negative(frozen_clock: FrozenClock):
    with pytest.raises(MozValidationError, match=">= 0"):
        _signature(frozen_clock).set_expires_threshold(-1)


def test_constructor_validates_threshold(frozen_clock: FrozenClock):
    with pytest.raises(MozTypeError):
        _signature(frozen_clock, expires_threshold="300")
