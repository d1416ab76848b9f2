"""Human-readable descriptions of Linkscape response codes."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

NO_EXPLANATION = "No explanation"

EXPLANATIONS: Mapping[str, str] = MappingProxyType(
    {
        # anchor-text scopes
        "apu": "Returns phrases found in links to the target URL",
        "aps": "Returns phrases found in links to the target subdomain",
        "app": "Returns phrases found in links to the target root domain",
        "atu": "Returns terms found in links to the target URL",
        "ats": "Returns terms found in links to the target subdomain",
        "atp": "Returns terms found in links to the target root domain",
        # url metrics
        "ut": "Title of the page, if available",
        "uu": "Canonical form of the URL",
        "ufq": "Subdomain of the URL",
        "upl": "Root domain of the URL",
        "ueid": "Number of external equity links to the URL",
        "feid": "Number of subdomains with at least one external link to this subdomain",
        "peid": "Number of root domains with at least one external link to this root domain",
        "ujid": "Number of equity links to the URL, internal or external",
        "uifq": "Number of subdomains with any pages linking to the URL",
        "uipl": "Number of root domains with any pages linking to the URL",
        "uid": "Number of links to the URL, equity or non-equity, internal or external",
        "fid": "Number of subdomains with any pages linking to the subdomain of the URL",
        "pid": "Number of root domains with any pages linking to the root domain of the URL",
        "umrp": "MozRank of the URL, normalized 10-point score",
        "umrr": "MozRank of the URL, raw score",
        "fmrp": "MozRank of the subdomain, normalized 10-point score",
        "fmrr": "MozRank of the subdomain, raw score",
        "pmrp": "MozRank of the root domain, normalized 10-point score",
        "pmrr": "MozRank of the root domain, raw score",
        "utrp": "MozTrust of the URL, normalized 10-point score",
        "utrr": "MozTrust of the URL, raw score",
        "ftrp": "MozTrust of the subdomain, normalized 10-point score",
        "ftrr": "MozTrust of the subdomain, raw score",
        "ptrp": "MozTrust of the root domain, normalized 10-point score",
        "ptrr": "MozTrust of the root domain, raw score",
        "uemrp": "MozRank passed by external equity links to the URL, normalized 10-point score",
        "uemrr": "MozRank passed by external equity links to the URL, raw score",
        "fejp": "MozRank passed by external equity links to the subdomain, normalized 10-point score",
        "fejr": "MozRank passed by external equity links to the subdomain, raw score",
        "pejp": "MozRank passed by external equity links to the root domain, normalized 10-point score",
        "pejr": "MozRank passed by external equity links to the root domain, raw score",
        "fjp": "MozRank of the subdomain from all links, normalized 10-point score",
        "fjr": "MozRank of the subdomain from all links, raw score",
        "pjp": "MozRank of the root domain from all links, normalized 10-point score",
        "pjr": "MozRank of the root domain from all links, raw score",
        "fspsc": "Spam score of the subdomain",
        "us": "HTTP status code recorded for the URL",
        "fuid": "Number of links to the subdomain of the URL",
        "puid": "Number of links to the root domain of the URL",
        "fipl": "Number of root domains linking to the subdomain of the URL",
        "upa": "Page Authority: predicted ranking strength of the URL, 100-point scale",
        "pda": "Domain Authority: predicted ranking strength of the root domain, 100-point scale",
        "ued": "Number of external links to the URL",
        "fed": "Number of external links to the subdomain of the URL",
        "ped": "Number of external links to the root domain of the URL",
        "pib": "Number of C blocks with links to the root domain",
        "ulc": "Time the URL was last crawled, as a Unix timestamp",
        # links
        "lf": "Bit flags describing the link (nofollow, redirect, canonical, ...)",
        "lt": "Anchor text of the link",
        "lnt": "Normalized anchor text of the link",
        "lmrp": "MozRank passed by the link, normalized 10-point score",
        "lmrr": "MozRank passed by the link, raw score",
        # anchor text
        "apst": "The anchor term or phrase",
        "apiu": "Number of internal pages linking with this anchor text",
        "apif": "Number of internal subdomains linking with this anchor text",
        "apeu": "Number of external pages linking with this anchor text",
        "apef": "Number of external subdomains linking with this anchor text",
        "apep": "Number of external root domains linking with this anchor text",
        "apimp": "MozRank passed by internal links with this anchor text",
        "apemp": "MozRank passed by external links with this anchor text",
        "apf": "Bit flags describing links that use this anchor text",
    }
)


def explain(code: str) -> str:
    return EXPLANATIONS.get(code, NO_EXPLANATION)


__all__ = [
    "NO_EXPLANATION",
    "EXPLANATIONS",
    "explain",
]
