"""
Request value and builder for http_stream.
"""
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple
from urllib.parse import urlsplit

from ..exceptions import InvalidURLError, RequestBuildError, UnsupportedMethodError
from ..types import (
    SUPPORTED_METHODS,
    HeaderPairs,
    HeadersInput,
    HttpMethod,
    QueryInput,
    QueryPairs,
)
from .query import append_query, decode_query, merge_query, to_pairs

logger = logging.getLogger("http_stream.request")

DEFAULT_PORT = 80
DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
}


@dataclass(frozen=True)
class Request:
    """Immutable description of an HTTP request.

    Fields:
    - scheme: lowercased URL scheme, e.g. "http"
    - host: host as written in the URL, e.g. "localhost"
    - port: explicit URL port or the scheme default, e.g. 80
    - path: e.g. "/users/1/avatar.png"
    - path_with_query: e.g. "/users/1/avatar.png?foo=bar"
    - method: e.g. "GET"
    - headers: e.g. (("authorization", "Bearer 123"),)
    - query: e.g. (("id", "1"),)
    - body: e.g. {"id": "1"}
    """

    scheme: Optional[str] = None
    host: Optional[str] = None
    port: int = DEFAULT_PORT
    path: str = "/"
    path_with_query: str = "/"
    method: HttpMethod = "GET"
    headers: HeaderPairs = ()
    query: QueryPairs = ()
    body: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    # body is a read-only mapping, so the value is comparable but not hashable
    __hash__ = None

    def __post_init__(self):
        # Freeze containers so the value cannot change through its fields
        object.__setattr__(self, "headers", to_pairs(self.headers))
        object.__setattr__(self, "query", to_pairs(self.query))
        if not isinstance(self.body, MappingProxyType):
            object.__setattr__(self, "body", MappingProxyType(dict(self.body or {})))

    @property
    def url(self) -> str:
        """Absolute URL for this request."""
        return url_for(self)


@dataclass(frozen=True)
class BuildResult:
    """Outcome of build_request: either a request or the error that prevented it."""

    request: Optional[Request] = None
    error: Optional[RequestBuildError] = None

    __hash__ = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Request:
        """Return the request, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.request


def _host_from_netloc(netloc: str) -> str:
    hostinfo = netloc.rpartition("@")[2]
    if hostinfo.startswith("["):
        return hostinfo[1:].partition("]")[0]
    return hostinfo.partition(":")[0]


def _split_url(url: Any) -> Tuple[str, str, int, str, str]:
    """Decompose an absolute URL into scheme, host, port, path and raw query."""
    if not isinstance(url, str):
        raise InvalidURLError("URL must be a string", url)

    try:
        parts = urlsplit(url)
        explicit_port = parts.port
    except ValueError as e:
        raise InvalidURLError(f"Invalid URL: {url!r} ({e})", url) from e

    if not parts.scheme:
        raise InvalidURLError(f"Invalid URL: {url!r} has no scheme", url)

    host = _host_from_netloc(parts.netloc)
    if not host:
        raise InvalidURLError(f"Invalid URL: {url!r} has no host", url)

    scheme = parts.scheme.lower()
    if explicit_port is not None:
        port = explicit_port
    else:
        port = DEFAULT_PORTS.get(scheme, DEFAULT_PORT)

    return scheme, host, port, parts.path, parts.query


def build_request(
    method: Any,
    url: Any,
    *,
    headers: Optional[HeadersInput] = None,
    body: Optional[Mapping[str, Any]] = None,
    query: Optional[QueryInput] = None,
) -> BuildResult:
    """
    Build a Request without raising.

    Returns a BuildResult carrying either the request or an
    UnsupportedMethodError / InvalidURLError.
    """
    if method not in SUPPORTED_METHODS:
        logger.debug(f"build_request: rejected method={method!r}")
        return BuildResult(error=UnsupportedMethodError(method, SUPPORTED_METHODS))

    try:
        scheme, host, port, path, raw_query = _split_url(url)
    except InvalidURLError as e:
        logger.debug(f"build_request: rejected url={url!r}: {e}")
        return BuildResult(error=e)

    merged = merge_query(decode_query(raw_query), query)
    path = path or "/"
    path_with_query = append_query(path, merged)

    logger.debug(
        f"build_request: method={method}, scheme={scheme}, host={host}, port={port}, "
        f"path_with_query={path_with_query}"
    )

    return BuildResult(
        request=Request(
            scheme=scheme,
            host=host,
            port=port,
            path=path,
            path_with_query=path_with_query,
            method=method,
            headers=to_pairs(headers),
            query=merged,
            body=MappingProxyType(dict(body or {})),
        )
    )


def new_request(
    method: Any,
    url: Any,
    *,
    headers: Optional[HeadersInput] = None,
    body: Optional[Mapping[str, Any]] = None,
    query: Optional[QueryInput] = None,
) -> Request:
    """
    Parse ``url`` and use ``method`` to build a Request.

    Supported options:
    - headers: HTTP headers to send, as a mapping or a sequence of pairs.
    - body: mapping sent as the request payload.
    - query: extra query parameters; on key collision they replace the
      parameters embedded in ``url``.

    Raises UnsupportedMethodError if ``method`` is not supported and
    InvalidURLError if ``url`` is not a string or cannot be parsed.
    """
    return build_request(method, url, headers=headers, body=body, query=query).unwrap()


def url_for(request: Request) -> str:
    """Absolute URL for a request: scheme://host:port/path?query."""
    host = request.host
    if host and ":" in host:
        host = f"[{host}]"
    return f"{request.scheme}://{host}:{request.port}{request.path_with_query}"
