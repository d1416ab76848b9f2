"""Request parameter validation.

Each validator returns ``True`` on success and ``None`` when the value is
absent, so optional parameters can be passed through unconditionally.
Failures raise ``MozTypeError`` for datatype problems and
``MozValidationError`` for values that are present but not allowed.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from ..core.errors import MozTypeError, MozValidationError
from ..core.flags import lookup_flag
from ..core.text import contains_value, is_valid_url


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def validate_url(url: object) -> bool | None:
    if url is None:
        return None
    if not isinstance(url, str):
        raise MozTypeError("Invalid datatype for url", field="url")
    if not is_valid_url(url):
        raise MozValidationError(f"Url: {url} is not a valid url", field=url)
    return True


def validate_urls(urls: object) -> bool:
    if not _is_sequence(urls):
        raise MozTypeError("Invalid datatype", field="urls")
    for url in urls:
        validate_url(url)
    return True


def validate_numeric(value: object = None) -> bool | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MozTypeError("Invalid datatype", field=repr(value))
    if not math.isfinite(value):
        raise MozTypeError("Invalid datatype", field=repr(value))
    return True


def validate_mapping(
    mapping: Mapping[str, Sequence[str]] | None = None,
    scope: str | None = None,
    field: str | None = None,
) -> bool | None:
    """Check ``field`` is allowed for ``scope``.

    Scopes missing from ``mapping`` are accepted as-is.
    """

    if mapping is None or scope is None or field is None:
        return None
    if scope not in mapping:
        return None
    allowed = mapping[scope]
    if not _is_sequence(allowed):
        raise MozTypeError("Invalid datatype for mapping", field=scope)
    if field not in allowed:
        raise MozValidationError(f"Invalid mapping between {scope} and {field}", field=field)
    return True


def validate_mappings(
    mapping: Mapping[str, Sequence[str]] | None = None,
    scopes: str | Sequence[str] | None = None,
    field: str | None = None,
) -> bool | None:
    if mapping is None or scopes is None or field is None:
        return None
    if isinstance(scopes, str):
        scopes = [scopes]
    for scope in scopes:
        validate_mapping(mapping, scope, field)
    return True


def validate_string(value: object = None) -> bool | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise MozTypeError("Invalid datatype provided.", field=repr(value))
    return True


def validate_col_type(cols: object = None, kind: str | None = None) -> bool | None:
    if cols is None:
        return None
    if not _is_sequence(cols):
        raise MozTypeError("Wrong datatype provided.", field=kind)
    for label in cols:
        if not isinstance(label, str):
            raise MozTypeError("Wrong datatype provided.", field=kind)
        lookup_flag(kind, label)
    return True


def validate_cols(params: Mapping[str, object], bit_flag_mapping: Mapping[str, str]) -> bool:
    for name, kind in bit_flag_mapping.items():
        validate_col_type(params.get(name), kind)
    return True


def validate_field_in_array(
    value: object,
    reference: Sequence[object] | None,
    label: str,
) -> bool | None:
    if value is None:
        return None
    if _is_sequence(value) or isinstance(value, Mapping):
        raise MozTypeError(f"Incorrect datatype for {label}", field=label)
    if reference is None:
        raise MozValidationError(f"No field found on prototype for {label}", field=label)
    try:
        found = contains_value(reference, value)
    except MozTypeError:
        raise MozTypeError(f"Incorrect datatype for {label}", field=label) from None
    if not found:
        raise MozValidationError(f"{value} not found in {label}.", field=label)
    return True


def validate_presence(value: object, label: str) -> bool:
    if value is None:
        raise MozValidationError(f"{label} not present!", field=label)
    return True


def validate_params(params: Mapping[str, object] | None, accepted_params: Mapping[str, object]) -> bool | None:
    if params is None:
        return None
    for name in params:
        if name not in accepted_params:
            raise MozValidationError(f"Unrecognized parameter: {name}", field=name)
    return True


__all__ = [
    "validate_url",
    "validate_urls",
    "validate_numeric",
    "validate_mapping",
    "validate_mappings",
    "validate_string",
    "validate_col_type",
    "validate_cols",
    "validate_field_in_array",
    "validate_presence",
    "validate_params",
]
