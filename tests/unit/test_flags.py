from __future__ import annotations

import itertools
import warnings
from pathlib import Path

import pytest

from moz_linkscape.core.errors import MozDeprecatedFlagWarning, MozTypeError, MozValidationError
from moz_linkscape.core.flags import (
    ANCHOR_TEXT,
    BIT_FLAGS,
    LINKS,
    URL_METRICS,
    bit_position,
    build_bitmask,
    decode_bitmask,
    response_fields,
)


def test_build_bitmask_ors_bit_positions():
    assert build_bitmask(URL_METRICS, ["Title", "Subdomain", "Links"]) == 2057


def test_build_bitmask_exceeds_32_bits():
    assert build_bitmask(URL_METRICS, ["Title", "Domain Authority"]) == 68719476737
    assert build_bitmask(URL_METRICS, ["Links to Subdomain"]) == 2**32


def test_build_bitmask_of_nothing_is_zero():
    assert build_bitmask(URL_METRICS, []) == 0


@pytest.mark.parametrize(
    "labels",
    [
        ("Title", "Domain Authority"),
        ("Page Authority", "Canonical URL", "Time last crawled"),
        ("Subdomain", "Links", "External links to root domain"),
    ],
)
def test_build_bitmask_is_order_independent(labels):
    masks = {build_bitmask(URL_METRICS, list(order)) for order in itertools.permutations(labels)}
    assert len(masks) == 1


@pytest.mark.parametrize("kind", [URL_METRICS, LINKS, ANCHOR_TEXT])
def test_decode_recovers_non_deprecated_labels(kind: str):
    labels = [label for label, flag in BIT_FLAGS[kind].items() if not flag.deprecated]
    assert set(decode_bitmask(kind, build_bitmask(kind, labels))) == set(labels)


def test_decode_returns_labels_in_bit_order():
    assert decode_bitmask(URL_METRICS, 68719476737 | 2048) == ("Title", "Links", "Domain Authority")


def test_decode_rejects_negative_or_non_int_mask():
    with pytest.raises(MozTypeError):
        decode_bitmask(URL_METRICS, -1)
    with pytest.raises(MozTypeError):
        decode_bitmask(URL_METRICS, "2057")


def test_unknown_label_names_the_label():
    with pytest.raises(MozValidationError, match="Invalid Bit Flag: Title") as exc_info:
        build_bitmask(ANCHOR_TEXT, ["Title"])
    assert exc_info.value.field == "Title"


def test_lookup_is_case_sensitive():
    with pytest.raises(MozValidationError, match="Invalid Bit Flag: title"):
        bit_position(URL_METRICS, "title")


def test_unknown_kind_is_rejected():
    with pytest.raises(MozValidationError, match="Unknown column flag kind"):
        bit_position("top-pages", "Title")


def test_string_instead_of_list_is_rejected():
    with pytest.raises(MozTypeError, match="Wrong datatype provided."):
        build_bitmask(URL_METRICS, "Title")


def test_deprecated_label_warns_but_resolves():
    with pytest.warns(MozDeprecatedFlagWarning, match="MozRank: URL"):
        mask = build_bitmask(URL_METRICS, ["MozRank: URL"])
    assert mask == 16384


def test_deprecated_warning_points_at_caller():
    with pytest.warns(MozDeprecatedFlagWarning) as record:
        build_bitmask(URL_METRICS, ["MozTrust"])
    assert Path(record[0].filename).name == Path(__file__).name


def test_deprecated_label_resolves_silently_when_warn_is_off():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert build_bitmask(URL_METRICS, ["MozRank: URL"], warn=False) == 16384


def test_current_label_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert bit_position(ANCHOR_TEXT, "External MozRank Passed") == 9


def test_response_fields_lists_json_keys():
    assert response_fields(URL_METRICS, ["Title", "Page Authority"]) == ("ut", "upa")
    assert response_fields(LINKS, ["MozRank Passed"]) == ("lmrp", "lmrr")


def test_response_fields_rejects_unknown_label():
    with pytest.raises(MozValidationError, match="Invalid Bit Flag: Nope"):
        response_fields(URL_METRICS, ["Nope"])


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        BIT_FLAGS[URL_METRICS]["Title"] = None  # type: ignore[index]
