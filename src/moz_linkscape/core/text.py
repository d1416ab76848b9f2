"""String and url helpers."""

from __future__ import annotations

import re
from collections.abc import Sequence
from urllib.parse import quote

from .errors import MozTypeError

_URL_PATTERN = re.compile(
    r"^(?:[a-z][a-z0-9+.\-]*://)?"  # optional scheme
    r"(?:[a-z0-9_](?:[a-z0-9_\-]*[a-z0-9_])?\.)+"
    r"[a-z]{2,}"
    r"(?::\d{1,5})?"
    r"(?:[/?#]\S*)?$",
    re.IGNORECASE,
)
_WORD_PATTERN = re.compile(r"\S+")

# Characters left as-is by ECMAScript encodeURIComponent besides alphanumerics and "-_.~".
_URI_COMPONENT_SAFE = "!*'()"


def to_title_case(text: str) -> str:
    """Capitalize the first letter of each word and lowercase the rest."""

    return _WORD_PATTERN.sub(lambda match: match.group(0)[:1].upper() + match.group(0)[1:].lower(), text)


def capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def pascal_to_camel_case(text: str) -> str:
    return text[:1].lower() + text[1:]


def is_valid_url(value: str) -> bool:
    if not isinstance(value, str):
        return False
    return _URL_PATTERN.match(value) is not None


def contains_value(values: Sequence[object], value: object) -> bool:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise MozTypeError("Invalid datatype")
    return value in values


def encode_uri_component(value: object) -> str:
    if value is None:
        return ""
    return quote(str(value), safe=_URI_COMPONENT_SAFE)


__all__ = [
    "to_title_case",
    "capitalize",
    "pascal_to_camel_case",
    "is_valid_url",
    "contains_value",
    "encode_uri_component",
]
