"""Signed request url construction."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from urllib.parse import unquote

from ..core.flags import build_bitmask
from ..core.signature import Signature
from ..core.text import capitalize, encode_uri_component, pascal_to_camel_case
from .schemas import EndpointSchema

DEFAULT_BASE_URL = "http://lsapi.seomoz.com/linkscape"

AUTH_PARAMS = ("AccessID", "Expires", "Signature")


def encode_target(target: str | None) -> str:
    return encode_uri_component(target)


def append_param(name: str, value: object, trailing_ampersand: bool = True) -> str:
    fragment = f"{capitalize(name)}={value}"
    return fragment + "&" if trailing_ampersand else fragment


def build_filter_value(value: object) -> object:
    if isinstance(value, Sequence) and not isinstance(value, str):
        return "+".join(str(item) for item in value)
    return value


def _format_scalar(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return encode_uri_component(value)


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    return isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 0


def parse_query(query: str) -> dict[str, str]:
    """Decode a serialized query back into caller-style parameter names.

    Signed auth fields are dropped.
    """

    params: dict[str, str] = {}
    for fragment in query.lstrip("?").split("&"):
        if not fragment:
            continue
        key, _, value = fragment.partition("=")
        if key in AUTH_PARAMS:
            continue
        params[pascal_to_camel_case(key)] = unquote(value)
    return params


class UrlBuilder:
    """Builds signed urls for one endpoint kind."""

    def __init__(
        self,
        schema: EndpointSchema,
        signature: Signature,
        *,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._schema = schema
        self._signature = signature
        self._base_url = base_url.rstrip("/")

    @property
    def kind(self) -> str:
        return self._schema.kind

    def build_endpoint_path(self) -> str:
        return f"{self._base_url}/{self._schema.kind}/"

    def render_value(self, name: str, value: object) -> str:
        kind = self._schema.bit_flag_mapping.get(name)
        if kind is not None and isinstance(value, Sequence) and not isinstance(value, str):
            return str(build_bitmask(kind, value, warn=False))
        if isinstance(value, Sequence) and not isinstance(value, str):
            return str(build_filter_value([_format_scalar(item) for item in value]))
        return _format_scalar(value)

    def serialize_params(self, params: Mapping[str, object]) -> str:
        # Keys outside the schema are skipped here; rejecting them is the validators' job.
        names = [
            name
            for name in self._schema.accepted_params
            if name in params and not _is_blank(params[name])
        ]
        last = len(names) - 1
        return "".join(
            append_param(name, self.render_value(name, params[name]), index < last)
            for index, name in enumerate(names)
        )

    def build_signed_query(self) -> str:
        signature = self._signature.generate()
        return (
            f"AccessID={self._signature.access_id}&"
            f"Expires={self._signature.get_expires()}&"
            f"Signature={encode_uri_component(signature)}"
        )

    def build_url(self, params: Mapping[str, object] | None = None, target: str | None = None) -> str:
        query = self.serialize_params(params or {})
        path = self.build_endpoint_path() + encode_target(target)
        signed = self.build_signed_query()
        if query:
            return f"{path}?{query}&{signed}"
        return f"{path}?{signed}"


__all__ = [
    "DEFAULT_BASE_URL",
    "AUTH_PARAMS",
    "encode_target",
    "append_param",
    "build_filter_value",
    "parse_query",
    "UrlBuilder",
]
