"""Shared request preparation for sync/async endpoints."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .schemas import TARGET_NAMED, EndpointSchema
from .url_builder import UrlBuilder
from .validators import (
    validate_cols,
    validate_field_in_array,
    validate_mappings,
    validate_numeric,
    validate_params,
    validate_presence,
    validate_string,
    validate_url,
    validate_urls,
)


@dataclass(slots=True, frozen=True)
class PreparedPost:
    url: str
    body: tuple[str, ...]


def validate_request_params(schema: EndpointSchema, params: Mapping[str, object]) -> None:
    """Reject params ``schema`` does not accept before any url is built."""

    validate_params(params, schema.accepted_params)
    for name in schema.required_params:
        validate_presence(params.get(name), name)
    validate_cols(params, schema.bit_flag_mapping)
    for name in schema.numeric_params:
        validate_numeric(params.get(name))
    for name in schema.url_params:
        validate_url(params.get(name))

    scope = params.get("scope")
    sort = params.get("sort")
    validate_string(scope)
    validate_string(sort)
    if schema.scopes:
        validate_field_in_array(scope, schema.scopes, "scope")
    if "sort" in schema.accepted_params:
        validate_field_in_array(sort, schema.sorts, "sort")
    validate_mappings(schema.valid_mappings, scope, sort)

    filters = params.get("filter")
    if isinstance(filters, Sequence) and not isinstance(filters, str):
        for value in filters:
            validate_field_in_array(value, schema.filters, "filter")
    else:
        validate_field_in_array(filters, schema.filters, "filter")


def validate_target(schema: EndpointSchema, target: object) -> None:
    validate_presence(target, "target")
    if schema.target_kind == TARGET_NAMED:
        validate_field_in_array(target, schema.targets, "target")
        return
    validate_url(target)


def normalize_targets(targets: str | Sequence[str] | None) -> tuple[list[str], bool]:
    """Return ``(targets, is_batch)``."""

    if isinstance(targets, Sequence) and not isinstance(targets, str):
        return list(targets), True
    return [targets], False


def prepare_get_urls(
    builder: UrlBuilder,
    schema: EndpointSchema,
    targets: str | Sequence[str] | None,
    params: Mapping[str, object] | None,
) -> tuple[list[str], bool]:
    resolved_params = dict(params or {})
    validate_request_params(schema, resolved_params)
    target_list, is_batch = normalize_targets(targets)
    for target in target_list:
        validate_target(schema, target)
    return [builder.build_url(resolved_params, target) for target in target_list], is_batch


def prepare_post(
    builder: UrlBuilder,
    schema: EndpointSchema,
    targets: Sequence[str],
    params: Mapping[str, object] | None,
) -> PreparedPost:
    resolved_params = dict(params or {})
    validate_request_params(schema, resolved_params)
    validate_urls(targets)
    return PreparedPost(url=builder.build_url(resolved_params), body=tuple(targets))


__all__ = [
    "PreparedPost",
    "validate_request_params",
    "validate_target",
    "normalize_targets",
    "prepare_get_urls",
    "prepare_post",
]
