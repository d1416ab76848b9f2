"""Column bit flags per endpoint kind.

Linkscape selects response columns with a single integer whose bits each
name one metric. Bit positions differ per column family (url metrics,
links, anchor text) and reach past 32 bits, so masks are plain Python
ints and never truncated.
"""

from __future__ import annotations

import inspect
import logging
import os
import warnings
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .errors import MozDeprecatedFlagWarning, MozTypeError, MozValidationError

logger = logging.getLogger("moz_linkscape")

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep

URL_METRICS = "url-metrics"
LINKS = "links"
ANCHOR_TEXT = "anchor-text"


@dataclass(slots=True, frozen=True)
class ColumnFlag:
    kind: str
    label: str
    position: int
    fields: tuple[str, ...] = ()
    deprecated: bool = False

    @property
    def value(self) -> int:
        return 1 << self.position


def _table(kind: str, rows: Iterable[tuple[str, int, tuple[str, ...], bool]]) -> Mapping[str, ColumnFlag]:
    return MappingProxyType(
        {
            label: ColumnFlag(kind=kind, label=label, position=position, fields=fields, deprecated=deprecated)
            for label, position, fields, deprecated in rows
        }
    )


_URL_METRICS_FLAGS = _table(
    URL_METRICS,
    [
        ("Title", 0, ("ut",), False),
        ("Canonical URL", 2, ("uu",), False),
        ("Subdomain", 3, ("ufq",), False),
        ("Root Domain", 4, ("upl",), False),
        ("External Equity Links", 5, ("ueid",), False),
        ("Subdomains Linking", 6, ("feid",), False),
        ("Root Domains Linking", 7, ("peid",), False),
        ("Equity Links", 8, ("ujid",), False),
        ("Subdomains, Subdomains Linking", 9, ("uifq",), False),
        ("Root Domains, Root Domains Linking", 10, ("uipl",), False),
        ("Links", 11, ("uid",), False),
        ("Subdomain, Subdomains Linking", 12, ("fid",), False),
        ("Root Domain, Root Domains Linking", 13, ("pid",), False),
        ("MozRank: URL", 14, ("umrp", "umrr"), True),
        ("MozRank: Subdomain", 15, ("fmrp", "fmrr"), True),
        ("MozRank: Root Domain", 16, ("pmrp", "pmrr"), True),
        ("MozTrust", 17, ("utrp", "utrr"), True),
        ("MozTrust: Subdomain", 18, ("ftrp", "ftrr"), True),
        ("MozTrust: Root Domain", 19, ("ptrp", "ptrr"), True),
        ("MozRank: External Equity", 20, ("uemrp", "uemrr"), True),
        ("MozRank: Subdomain, External Equity", 21, ("fejp", "fejr"), True),
        ("MozRank: Root Domain, External Equity", 22, ("pejp", "pejr"), True),
        ("MozRank: Subdomain Combined", 23, ("fjp", "fjr"), True),
        ("MozRank: Root Domain Combined", 24, ("pjp", "pjr"), True),
        ("Subdomain Spam Score", 26, ("fspsc",), False),
        ("HTTP Status Code", 29, ("us",), False),
        ("Links to Subdomain", 32, ("fuid",), False),
        ("Links to Root Domain", 33, ("puid",), False),
        ("Root Domains Linking to Subdomain", 34, ("fipl",), False),
        ("Page Authority", 35, ("upa",), False),
        ("Domain Authority", 36, ("pda",), False),
        ("External links", 39, ("ued",), False),
        ("External links to subdomain", 47, ("fed",), False),
        ("External links to root domain", 51, ("ped",), False),
        ("Linking C Blocks", 55, ("pib",), False),
        ("Time last crawled", 57, ("ulc",), False),
    ],
)

_LINK_FLAGS = _table(
    LINKS,
    [
        ("Flags", 1, ("lf",), False),
        ("Anchor Text", 2, ("lt",), False),
        ("Normalized Anchor Text", 3, ("lnt",), False),
        ("MozRank Passed", 4, ("lmrp", "lmrr"), True),
    ],
)

_ANCHOR_TEXT_FLAGS = _table(
    ANCHOR_TEXT,
    [
        ("Term or Phrase", 1, ("apst",), False),
        ("Internal Pages Linking", 3, ("apiu",), False),
        ("Internal Subdomains Linking", 4, ("apif",), False),
        ("External Pages Linking", 5, ("apeu",), False),
        ("External Subdomains Linking", 6, ("apef",), False),
        ("External Root Domains Linking", 7, ("apep",), False),
        ("Internal MozRank Passed", 8, ("apimp",), False),
        ("External MozRank Passed", 9, ("apemp",), False),
        ("Flags", 10, ("apf",), False),
    ],
)

BIT_FLAGS: Mapping[str, Mapping[str, ColumnFlag]] = MappingProxyType(
    {
        URL_METRICS: _URL_METRICS_FLAGS,
        LINKS: _LINK_FLAGS,
        ANCHOR_TEXT: _ANCHOR_TEXT_FLAGS,
    }
)


def _flags_for(kind: str) -> Mapping[str, ColumnFlag]:
    try:
        return BIT_FLAGS[kind]
    except KeyError:
        raise MozValidationError(f"Unknown column flag kind: {kind}", field=kind) from None


def _caller_stacklevel() -> int:
    """Stack level of the first frame outside this package."""

    frame = inspect.currentframe()
    level = 0
    while frame is not None and os.path.abspath(frame.f_code.co_filename).startswith(_PACKAGE_DIR):
        frame = frame.f_back
        level += 1
    return level


def lookup_flag(kind: str, label: str, *, warn: bool = True) -> ColumnFlag:
    """Resolve ``label`` for ``kind``; warns when the flag is deprecated.

    Pass ``warn=False`` when the labels were already validated for the
    current request.
    """

    flag = _flags_for(kind).get(label)
    if flag is None:
        raise MozValidationError(f"Invalid Bit Flag: {label} ({kind})", field=label)
    if flag.deprecated and warn:
        logger.warning("deprecated column flag kind=%s label=%s", kind, label)
        warnings.warn(
            f"Bit Flag {label} is deprecated for {kind}",
            MozDeprecatedFlagWarning,
            stacklevel=_caller_stacklevel(),
        )
    return flag


def bit_position(kind: str, label: str, *, warn: bool = True) -> int:
    return lookup_flag(kind, label, warn=warn).position


def build_bitmask(kind: str, labels: Iterable[str], *, warn: bool = True) -> int:
    if isinstance(labels, str):
        raise MozTypeError("Wrong datatype provided.", field=kind)
    mask = 0
    for label in labels:
        mask |= 1 << bit_position(kind, label, warn=warn)
    return mask


def decode_bitmask(kind: str, mask: int) -> tuple[str, ...]:
    """Labels whose bits are set in ``mask``, in bit order."""

    if isinstance(mask, bool) or not isinstance(mask, int) or mask < 0:
        raise MozTypeError("Invalid datatype for bitmask", field=kind)
    flags = sorted(_flags_for(kind).values(), key=lambda flag: flag.position)
    return tuple(flag.label for flag in flags if mask & flag.value)


def response_fields(kind: str, labels: Iterable[str]) -> tuple[str, ...]:
    """Response JSON keys produced by requesting ``labels``."""

    table = _flags_for(kind)
    fields: list[str] = []
    for label in labels:
        flag = table.get(label)
        if flag is None:
            raise MozValidationError(f"Invalid Bit Flag: {label} ({kind})", field=label)
        fields.extend(flag.fields)
    return tuple(fields)


__all__ = [
    "URL_METRICS",
    "LINKS",
    "ANCHOR_TEXT",
    "ColumnFlag",
    "BIT_FLAGS",
    "lookup_flag",
    "bit_position",
    "build_bitmask",
    "decode_bitmask",
    "response_fields",
]
