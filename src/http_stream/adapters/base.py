"""
Adapter interface shared by every transport backend.

An adapter has one capability: given a Request, produce a lazy, finite,
single-pass sequence of response body chunks.
"""
from typing import AsyncIterator, Iterator, List, Optional, Protocol, Tuple

from ..config import DefaultSerializer, default_serializer
from ..core.request import Request
from ..types import BODYLESS_METHODS


class Adapter(Protocol):
    """Synchronous transport adapter."""

    def stream(self, request: Request) -> Iterator[bytes]:
        """Stream the response body of ``request`` chunk by chunk."""
        ...

    def close(self) -> None:
        """Release the underlying connection pool."""
        ...


class AsyncAdapter(Protocol):
    """Asynchronous transport adapter."""

    def stream(self, request: Request) -> AsyncIterator[bytes]:
        """Stream the response body of ``request`` chunk by chunk."""
        ...

    async def close(self) -> None:
        """Release the underlying connection pool."""
        ...


def has_body(request: Request) -> bool:
    """Whether the request body is sent over the wire."""
    return bool(request.body) and request.method not in BODYLESS_METHODS


def prepare_headers(request: Request) -> List[Tuple[str, str]]:
    """Request headers as a list, with content-type added for JSON bodies."""
    headers = list(request.headers)
    if has_body(request) and "content-type" not in {k.lower() for k, _ in headers}:
        headers.append(("content-type", "application/json"))
    return headers


def prepare_body(
    request: Request,
    serializer: Optional[DefaultSerializer] = None,
) -> Optional[str]:
    """Serialized request body, or None when nothing is sent."""
    if not has_body(request):
        return None
    serializer = serializer or default_serializer
    return serializer.serialize(dict(request.body))


def describe(request: Request) -> str:
    """Short form of a request for log lines."""
    return f"{request.method} {request.scheme}://{request.host}:{request.port}{request.path}"
