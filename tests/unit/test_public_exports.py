from __future__ import annotations

import moz_linkscape
import moz_linkscape.endpoints as endpoints


def test_package_exports_clients_and_config():
    assert set(moz_linkscape.__all__) == {
        "MozClient",
        "AsyncMozClient",
        "MozClientConfig",
        "MozCredentials",
    }


def test_endpoints_package_exports_schema_and_builder_only():
    expected = {"ENDPOINT_KINDS", "SCHEMAS", "EndpointSchema", "UrlBuilder", "parse_query"}
    assert expected.issubset(set(endpoints.__all__))
    assert "MozEndpoint" not in endpoints.__all__
    assert not hasattr(endpoints, "prepare_get_urls")
