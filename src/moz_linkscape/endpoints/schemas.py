"""Static per-endpoint parameter schemas."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..core.errors import MozValidationError
from ..core.flags import ANCHOR_TEXT, LINKS, URL_METRICS

TOP_PAGES = "top-pages"
METADATA = "metadata"

ENDPOINT_KINDS = (URL_METRICS, LINKS, ANCHOR_TEXT, TOP_PAGES, METADATA)

TARGET_URL = "url"
TARGET_NAMED = "named"


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(slots=True, frozen=True)
class EndpointSchema:
    """Parameters accepted by one endpoint kind.

    ``accepted_params`` keeps declaration order, which is also the order
    parameters are serialized in. Its values are the server-side defaults
    and are never injected into a request.
    """

    kind: str
    accepted_params: Mapping[str, object] = field(default_factory=dict)
    bit_flag_mapping: Mapping[str, str] = field(default_factory=dict)
    valid_mappings: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    scopes: tuple[str, ...] = ()
    filters: tuple[str, ...] = ()
    numeric_params: tuple[str, ...] = ()
    url_params: tuple[str, ...] = ()
    required_params: tuple[str, ...] = ()
    target_kind: str = TARGET_URL
    targets: tuple[str, ...] = ()

    @property
    def sorts(self) -> tuple[str, ...]:
        seen: list[str] = []
        for fields in self.valid_mappings.values():
            for sort in fields:
                if sort not in seen:
                    seen.append(sort)
        return tuple(seen)


_PAGE_SORTS = ("page_authority", "domain_authority", "domains_linking_page")
_DOMAIN_SORTS = ("domain_authority", "domains_linking_domain")

LINK_MAPPINGS: Mapping[str, tuple[str, ...]] = _frozen(
    {
        "page_to_page": _PAGE_SORTS,
        "page_to_subdomain": _PAGE_SORTS,
        "page_to_domain": _PAGE_SORTS,
        "domain_to_page": _DOMAIN_SORTS,
        "domain_to_subdomain": _DOMAIN_SORTS,
        "domain_to_domain": _DOMAIN_SORTS,
    }
)

ANCHOR_TEXT_MAPPINGS: Mapping[str, tuple[str, ...]] = _frozen(
    {
        scope: ("domains_linking_page",)
        for scope in (
            "phrase_to_page",
            "phrase_to_subdomain",
            "phrase_to_domain",
            "term_to_page",
            "term_to_subdomain",
            "term_to_domain",
        )
    }
)

LINK_FILTERS = (
    "internal",
    "external",
    "follow",
    "nofollow",
    "equity",
    "nonequity",
    "rel_canonical",
    "301",
    "302",
)

TOP_PAGES_FILTERS = (
    "all",
    "status200",
    "status301",
    "status302",
    "status4xx",
    "status5xx",
)

SCHEMAS: Mapping[str, EndpointSchema] = _frozen(
    {
        URL_METRICS: EndpointSchema(
            kind=URL_METRICS,
            accepted_params=_frozen({"cols": None, "limit": None}),
            bit_flag_mapping=_frozen({"cols": URL_METRICS}),
            numeric_params=("limit",),
        ),
        LINKS: EndpointSchema(
            kind=LINKS,
            accepted_params=_frozen(
                {
                    "sourceCols": None,
                    "targetCols": None,
                    "linkCols": None,
                    "scope": None,
                    "sort": None,
                    "filter": None,
                    "sourceDomain": None,
                    "offset": 0,
                    "limit": 25,
                }
            ),
            bit_flag_mapping=_frozen(
                {
                    "sourceCols": URL_METRICS,
                    "targetCols": URL_METRICS,
                    "linkCols": LINKS,
                }
            ),
            valid_mappings=LINK_MAPPINGS,
            scopes=tuple(LINK_MAPPINGS),
            filters=LINK_FILTERS,
            numeric_params=("offset", "limit"),
            url_params=("sourceDomain",),
            required_params=("scope",),
        ),
        ANCHOR_TEXT: EndpointSchema(
            kind=ANCHOR_TEXT,
            accepted_params=_frozen(
                {
                    "cols": None,
                    "scope": None,
                    "sort": None,
                    "offset": 0,
                    "limit": 25,
                }
            ),
            bit_flag_mapping=_frozen({"cols": ANCHOR_TEXT}),
            valid_mappings=ANCHOR_TEXT_MAPPINGS,
            scopes=tuple(ANCHOR_TEXT_MAPPINGS),
            numeric_params=("offset", "limit"),
            required_params=("scope",),
        ),
        TOP_PAGES: EndpointSchema(
            kind=TOP_PAGES,
            accepted_params=_frozen({"cols": None, "filter": None, "offset": 0, "limit": 25}),
            bit_flag_mapping=_frozen({"cols": URL_METRICS}),
            filters=TOP_PAGES_FILTERS,
            numeric_params=("offset", "limit"),
        ),
        METADATA: EndpointSchema(
            kind=METADATA,
            target_kind=TARGET_NAMED,
            targets=("last_update.json", "next_update.json", "index_stats"),
        ),
    }
)


def get_schema(kind: str) -> EndpointSchema:
    try:
        return SCHEMAS[kind]
    except KeyError:
        raise MozValidationError(f"Unknown endpoint: {kind}", field=kind) from None


__all__ = [
    "TOP_PAGES",
    "METADATA",
    "ENDPOINT_KINDS",
    "TARGET_URL",
    "TARGET_NAMED",
    "EndpointSchema",
    "LINK_MAPPINGS",
    "ANCHOR_TEXT_MAPPINGS",
    "LINK_FILTERS",
    "TOP_PAGES_FILTERS",
    "SCHEMAS",
    "get_schema",
]
