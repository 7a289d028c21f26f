"""
Immutable HTTP request values with lazy, pluggable response streaming.

Builds Request values from a method, a URL and optional headers, body and
query overrides, and streams responses chunk by chunk through httpx-backed
adapters selected from configuration.
"""
from .types import (
    HttpMethod,
    RequestOptions,
    SUPPORTED_METHODS,
)
from .exceptions import (
    HTTPStreamError,
    RequestBuildError,
    UnsupportedMethodError,
    InvalidURLError,
    TransportError,
    HTTPStatusError,
    AdapterClosedError,
)
from .config import (
    AdapterConfig,
    TimeoutConfig,
    DefaultSerializer,
    load_config,
)
from .core.request import (
    BuildResult,
    Request,
    build_request,
    new_request,
    url_for,
)
from .adapters.base import Adapter, AsyncAdapter
from .adapters.httpx_adapter import HttpxAdapter, AsyncHttpxAdapter
from .factory import (
    create_adapter,
    get_default_adapter,
    reset_default_adapter,
)
from .api import (
    stream,
    get,
    options,
    head,
    trace,
    post,
    put,
    patch,
    delete,
)

__all__ = [
    # Types
    "HttpMethod",
    "RequestOptions",
    "SUPPORTED_METHODS",
    # Exceptions
    "HTTPStreamError",
    "RequestBuildError",
    "UnsupportedMethodError",
    "InvalidURLError",
    "TransportError",
    "HTTPStatusError",
    "AdapterClosedError",
    # Config
    "AdapterConfig",
    "TimeoutConfig",
    "DefaultSerializer",
    "load_config",
    # Request
    "BuildResult",
    "Request",
    "build_request",
    "new_request",
    "url_for",
    # Adapters
    "Adapter",
    "AsyncAdapter",
    "HttpxAdapter",
    "AsyncHttpxAdapter",
    # Factory
    "create_adapter",
    "get_default_adapter",
    "reset_default_adapter",
    # Streaming helpers
    "stream",
    "get",
    "options",
    "head",
    "trace",
    "post",
    "put",
    "patch",
    "delete",
]

__version__ = "0.1.0"
