"""
Exceptions raised by http_stream.
"""
from typing import Optional, Sequence


class HTTPStreamError(Exception):
    """Base class for every http_stream error."""


class RequestBuildError(HTTPStreamError, ValueError):
    """A request could not be built from the given arguments."""


class UnsupportedMethodError(RequestBuildError):
    """HTTP method is not in the supported whitelist."""

    def __init__(self, method: object, supported: Sequence[str]):
        self.method = method
        self.supported = tuple(supported)
        super().__init__(
            f"{method} is not supported. Supported methods: {', '.join(self.supported)}"
        )


class InvalidURLError(RequestBuildError):
    """URL is not a string or cannot be decomposed."""

    def __init__(self, message: str, url: object = None):
        self.url = url
        super().__init__(message)


class TransportError(HTTPStreamError):
    """Base class for adapter-side failures."""


class HTTPStatusError(TransportError):
    """Server answered with a non-2xx status."""

    def __init__(self, status_code: int, url: str, body: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        self.body = body
        message = f"HTTP {status_code}: {url}"
        if body:
            message = f"{message}: {body}"
        super().__init__(message)


class AdapterClosedError(TransportError):
    """Adapter was used after being closed."""

    def __init__(self, message: str = "Adapter has been closed"):
        super().__init__(message)
