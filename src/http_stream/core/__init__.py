"""
Core request building for http_stream.
"""
from .request import BuildResult, Request, build_request, new_request, url_for
from .query import decode_query, encode_query, merge_query

__all__ = [
    "BuildResult",
    "Request",
    "build_request",
    "new_request",
    "url_for",
    "decode_query",
    "encode_query",
    "merge_query",
]
