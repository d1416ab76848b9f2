"""Client configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from .core.errors import MozConfigurationError
from .core.signature import DEFAULT_EXPIRES_THRESHOLD
from .endpoints.url_builder import DEFAULT_BASE_URL

ACCESS_ID_ENV_VARS = ("MOZ_ACCESS_ID", "ACCESS_ID")
SECRET_KEY_ENV_VARS = ("MOZ_SECRET_KEY", "SECRET_KEY")


@dataclass(slots=True, frozen=True)
class MozCredentials:
    """Linkscape access id / secret key pair."""

    access_id: str
    secret_key: str = field(repr=False)

    def validate(self) -> None:
        for field_name in ("access_id", "secret_key"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or value.strip() == "":
                raise MozConfigurationError(
                    f"credentials.{field_name} is required",
                    field=field_name,
                )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "MozCredentials":
        env = os.environ if environ is None else environ
        credentials = cls(
            access_id=_first_env(env, ACCESS_ID_ENV_VARS),
            secret_key=_first_env(env, SECRET_KEY_ENV_VARS),
        )
        credentials.validate()
        return credentials


def _first_env(env: Mapping[str, str], names: tuple[str, ...]) -> str:
    for name in names:
        value = env.get(name)
        if value:
            return value
    return ""


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class MozClientConfig:
    """Runtime configuration for the Linkscape client."""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = "moz-linkscape-client/0.1.0"
    expires_threshold_seconds: int = DEFAULT_EXPIRES_THRESHOLD

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if isinstance(self.expires_threshold_seconds, bool) or not isinstance(
            self.expires_threshold_seconds, int
        ):
            raise ValueError("expires_threshold_seconds must be int")
        if self.expires_threshold_seconds < 0:
            raise ValueError("expires_threshold_seconds must be >= 0")
        self.transport.validate()


__all__ = [
    "ACCESS_ID_ENV_VARS",
    "SECRET_KEY_ENV_VARS",
    "MozCredentials",
    "TransportConfig",
    "MozClientConfig",
]
