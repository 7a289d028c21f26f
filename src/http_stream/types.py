"""
Type definitions for http_stream.
"""
from typing import (
    Any,
    Iterable,
    Literal,
    Mapping,
    Tuple,
    TypedDict,
    Union,
)


# HTTP methods accepted by the request builder (exact, uppercase match)
HttpMethod = Literal[
    "GET",
    "OPTIONS",
    "HEAD",
    "TRACE",
    "POST",
    "PUT",
    "PATCH",
    "DELETE",
]

SUPPORTED_METHODS: Tuple[str, ...] = (
    "GET",
    "OPTIONS",
    "HEAD",
    "TRACE",
    "POST",
    "PUT",
    "PATCH",
    "DELETE",
)

# Methods whose body is never sent over the wire
BODYLESS_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "TRACE"})

# Adapter names known to the factory
AdapterName = Literal["httpx", "httpx_async"]

HeaderPair = Tuple[str, str]
QueryPair = Tuple[str, Any]

HeaderPairs = Tuple[HeaderPair, ...]
QueryPairs = Tuple[QueryPair, ...]

# Accepted caller input: a mapping or an ordered sequence of pairs
HeadersInput = Union[Mapping[str, str], Iterable[Tuple[str, str]]]
QueryInput = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


class RequestOptions(TypedDict, total=False):
    """Optional overrides for the request builder."""

    headers: HeadersInput
    body: Mapping[str, Any]
    query: QueryInput
