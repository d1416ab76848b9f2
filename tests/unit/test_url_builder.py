from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType

import pytest

from moz_linkscape.core.signature import Signature
from moz_linkscape.endpoints.schemas import SCHEMAS
from moz_linkscape.endpoints.url_builder import (
    UrlBuilder,
    append_param,
    build_filter_value,
    encode_target,
    parse_query,
)
from tests.shared.client_fakes import (
    ACCESS_ID,
    FROZEN_NOW,
    SECRET_KEY,
    FrozenClock,
    expected_signed_query,
)


def _builder(kind: str, clock: FrozenClock | None = None, **schema_overrides) -> UrlBuilder:
    schema = replace(SCHEMAS[kind], **schema_overrides) if schema_overrides else SCHEMAS[kind]
    signature = Signature(ACCESS_ID, SECRET_KEY, clock=clock or FrozenClock(FROZEN_NOW))
    return UrlBuilder(schema, signature)


def test_encode_target():
    assert encode_target("https://news.ycombinator.com/news") == "https%3A%2F%2Fnews.ycombinator.com%2Fnews"
    assert encode_target(None) == ""


def test_append_param_pascal_cases_name():
    assert append_param("sourceCols", 5) == "SourceCols=5&"
    assert append_param("sourceDomain", "moz.com", False) == "SourceDomain=moz.com"


def test_build_filter_value():
    assert build_filter_value(["all", "status302", "status5xx"]) == "all+status302+status5xx"
    assert build_filter_value("all") == "all"


def test_build_endpoint_path():
    assert _builder("url-metrics").build_endpoint_path() == "http://lsapi.seomoz.com/linkscape/url-metrics/"
    assert _builder("top-pages").build_endpoint_path() == "http://lsapi.seomoz.com/linkscape/top-pages/"


def test_base_url_trailing_slash_is_normalized():
    signature = Signature(ACCESS_ID, SECRET_KEY, clock=FrozenClock(FROZEN_NOW))
    builder = UrlBuilder(SCHEMAS["links"], signature, base_url="https://proxy.example.com/linkscape/")
    assert builder.build_endpoint_path() == "https://proxy.example.com/linkscape/links/"


def test_serialize_params_for_links():
    params = {
        "limit": 50,
        "sourceDomain": "https://moz.com",
        "filter": "external",
        "sort": "page_authority",
        "scope": "page_to_page",
        "sourceCols": ["Title", "Domain Authority"],
    }
    assert _builder("links").serialize_params(params) == (
        "SourceCols=68719476737&Scope=page_to_page&Sort=page_authority"
        "&Filter=external&SourceDomain=https%3A%2F%2Fmoz.com&Limit=50"
    )


def test_serialize_params_uses_link_registry_for_link_cols():
    assert _builder("links").serialize_params({"linkCols": ["Flags", "Anchor Text"]}) == "LinkCols=6"


def test_serialize_params_follows_schema_order():
    params = {"limit": 20, "offset": 1, "cols": ["Title"]}
    assert _builder("top-pages").serialize_params(params) == "Cols=1&Offset=1&Limit=20"


def test_serialize_params_joins_filter_lists():
    params = {"filter": ["all", "status302", "status5xx"]}
    assert _builder("top-pages").serialize_params(params) == "Filter=all+status302+status5xx"


def test_serialize_params_skips_unknown_and_empty_keys():
    assert _builder("url-metrics").serialize_params({"col": "Title"}) == ""
    assert _builder("url-metrics").serialize_params({"cols": None, "limit": 10}) == "Limit=10"
    assert _builder("top-pages").serialize_params({"filter": [], "cols": [], "limit": 5}) == "Limit=5"


def test_serialize_params_with_custom_bit_flag_mapping():
    builder = _builder(
        "links",
        bit_flag_mapping=MappingProxyType({"sourceCols": "url-metrics", "linkCols": "url-metrics"}),
    )
    assert builder.serialize_params({"linkCols": ["Title"]}) == "LinkCols=1"


def test_build_signed_query(frozen_clock: FrozenClock):
    builder = _builder("url-metrics", frozen_clock)
    assert builder.build_signed_query() == expected_signed_query()


def test_build_signed_query_regenerates_on_each_call(frozen_clock: FrozenClock):
    builder = _builder("url-metrics", frozen_clock)
    builder.build_signed_query()
    frozen_clock.now += 120
    assert builder.build_signed_query() == expected_signed_query(frozen_clock.now)


def test_build_url_without_target(frozen_clock: FrozenClock):
    builder = _builder("url-metrics", frozen_clock)
    url = builder.build_url({"cols": ["Title", "Domain Authority"], "limit": 35})
    assert url == (
        "http://lsapi.seomoz.com/linkscape/url-metrics/?Cols=68719476737&Limit=35&"
        + expected_signed_query()
    )


def test_build_url_with_target(frozen_clock: FrozenClock):
    builder = _builder("url-metrics", frozen_clock)
    url = builder.build_url({"cols": ["Title", "Domain Authority"], "limit": 35}, "google.com")
    assert url == (
        "http://lsapi.seomoz.com/linkscape/url-metrics/google.com?Cols=68719476737&Limit=35&"
        + expected_signed_query()
    )


def test_build_url_without_params(frozen_clock: FrozenClock):
    builder = _builder("metadata", frozen_clock)
    assert builder.build_url(None, "index_stats") == (
        "http://lsapi.seomoz.com/linkscape/metadata/index_stats?" + expected_signed_query()
    )


def test_parse_query_decodes_caller_params(frozen_clock: FrozenClock):
    url = _builder("links", frozen_clock).build_url(
        {"scope": "page_to_page", "sourceDomain": "https://moz.com", "limit": 5},
        "moz.com",
    )
    assert parse_query(url.partition("?")[2]) == {
        "scope": "page_to_page",
        "sourceDomain": "https://moz.com",
        "limit": "5",
    }


@pytest.mark.parametrize("value", [35, 35.0])
def test_integral_numbers_render_without_fraction(value):
    assert _builder("url-metrics").serialize_params({"limit": value}) == "Limit=35"
