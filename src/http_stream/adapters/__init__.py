"""
Transport adapters for http_stream.
"""
from .base import Adapter, AsyncAdapter, prepare_body, prepare_headers
from .httpx_adapter import AsyncHttpxAdapter, HttpxAdapter

__all__ = [
    "Adapter",
    "AsyncAdapter",
    "prepare_body",
    "prepare_headers",
    "HttpxAdapter",
    "AsyncHttpxAdapter",
]
