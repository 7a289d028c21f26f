"""
Convenience wrappers: build a request and stream it through an adapter.
"""
from typing import Any, AsyncIterator, Iterator, Mapping, Optional, Union

from .core.request import new_request
from .factory import get_default_adapter
from .types import HeadersInput, HttpMethod, QueryInput

ChunkStream = Union[Iterator[bytes], AsyncIterator[bytes]]


def stream(
    method: HttpMethod,
    url: str,
    *,
    headers: Optional[HeadersInput] = None,
    body: Optional[Mapping[str, Any]] = None,
    query: Optional[QueryInput] = None,
    adapter: Optional[Any] = None,
) -> ChunkStream:
    """
    Build a request and return the lazy chunk stream of its response.

    The returned iterator is async when the adapter is async. Request build
    errors are raised here, before anything is sent.
    """
    request = new_request(method, url, headers=headers, body=body, query=query)
    adapter = adapter or get_default_adapter()
    return adapter.stream(request)


def get(url: str, **kwargs: Any) -> ChunkStream:
    """GET request."""
    return stream("GET", url, **kwargs)


def options(url: str, **kwargs: Any) -> ChunkStream:
    """OPTIONS request."""
    return stream("OPTIONS", url, **kwargs)


def head(url: str, **kwargs: Any) -> ChunkStream:
    """HEAD request."""
    return stream("HEAD", url, **kwargs)


def trace(url: str, **kwargs: Any) -> ChunkStream:
    """TRACE request."""
    return stream("TRACE", url, **kwargs)


def post(url: str, **kwargs: Any) -> ChunkStream:
    """POST request."""
    return stream("POST", url, **kwargs)


def put(url: str, **kwargs: Any) -> ChunkStream:
    """PUT request."""
    return stream("PUT", url, **kwargs)


def patch(url: str, **kwargs: Any) -> ChunkStream:
    """PATCH request."""
    return stream("PATCH", url, **kwargs)


def delete(url: str, **kwargs: Any) -> ChunkStream:
    """DELETE request."""
    return stream("DELETE", url, **kwargs)
