from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from moz_linkscape.config import MozCredentials  # noqa: E402
from tests.shared.client_fakes import ACCESS_ID, FROZEN_NOW, SECRET_KEY, FrozenClock  # noqa: E402


@pytest.fixture
def credentials() -> MozCredentials:
    return MozCredentials(access_id=ACCESS_ID, secret_key=SECRET_KEY)


@pytest.fixture
def frozen_clock() -> FrozenClock:
    return FrozenClock(FROZEN_NOW)
