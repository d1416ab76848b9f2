"""Endpoint schemas and request building."""

from .schemas import ENDPOINT_KINDS, SCHEMAS, EndpointSchema
from .url_builder import UrlBuilder, parse_query

__all__ = [
    "ENDPOINT_KINDS",
    "SCHEMAS",
    "EndpointSchema",
    "UrlBuilder",
    "parse_query",
]
