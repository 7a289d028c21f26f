"""
Configuration for http_stream adapters.

The request builder reads no configuration; everything here is consumed by
the transport adapters and the factory that selects one at start-up.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union
import json
import logging
import os

logger = logging.getLogger("http_stream.config")

ENV_ADAPTER = "HTTP_STREAM_ADAPTER"
ENV_TIMEOUT = "HTTP_STREAM_TIMEOUT"
ENV_CHUNK_SIZE = "HTTP_STREAM_CHUNK_SIZE"
ENV_VERBOSE = "HTTP_STREAM_VERBOSE"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class TimeoutConfig:
    """Timeout configuration in seconds."""

    connect: float = 5.0
    read: float = 30.0
    write: float = 10.0


@dataclass
class AdapterConfig:
    """Transport adapter configuration."""

    adapter: str = "httpx"
    timeout: Union[TimeoutConfig, float, None] = None
    verify_ssl: bool = True
    chunk_size: Optional[int] = None
    raise_for_status: bool = True
    verbose: bool = False


# Default values
DEFAULT_TIMEOUT = TimeoutConfig()
DEFAULT_ADAPTER = "httpx"


class DefaultSerializer:
    """Default JSON serializer."""

    def serialize(self, data: Any) -> str:
        """Serialize data to JSON string."""
        return json.dumps(data)

    def deserialize(self, text: str) -> Any:
        """Deserialize JSON string to data."""
        return json.loads(text)


default_serializer = DefaultSerializer()


def normalize_timeout(timeout: Union[TimeoutConfig, float, None]) -> TimeoutConfig:
    """Normalize timeout config."""
    if timeout is None:
        return DEFAULT_TIMEOUT
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=timeout, read=timeout, write=timeout)
    return timeout


def is_ssl_verify_disabled_by_env(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Check if SSL verification is disabled via environment variables.

    Returns True if any of these are set:
    - NODE_TLS_REJECT_UNAUTHORIZED=0
    - SSL_CERT_VERIFY=0
    """
    if environ is None:
        environ = os.environ
    node_tls = environ.get("NODE_TLS_REJECT_UNAUTHORIZED", "")
    ssl_cert_verify = environ.get("SSL_CERT_VERIFY", "")
    return node_tls == "0" or ssl_cert_verify == "0"


def _parse_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got: {value!r}") from e


def _parse_positive_int(name: str, value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got: {value!r}") from e
    if parsed <= 0:
        raise ValueError(f"{name} must be positive, got: {parsed}")
    return parsed


def load_config(environ: Optional[Mapping[str, str]] = None) -> AdapterConfig:
    """
    Build an AdapterConfig from environment variables.

    Recognized variables:
    - HTTP_STREAM_ADAPTER: adapter name (default "httpx")
    - HTTP_STREAM_TIMEOUT: timeout in seconds applied to connect/read/write
    - HTTP_STREAM_CHUNK_SIZE: size of yielded chunks in bytes
    - HTTP_STREAM_VERBOSE: print request/response panels (1/true/yes/on)
    - SSL_CERT_VERIFY=0 or NODE_TLS_REJECT_UNAUTHORIZED=0: disable TLS verification
    """
    if environ is None:
        environ = os.environ

    config = AdapterConfig(
        adapter=environ.get(ENV_ADAPTER, "").strip() or DEFAULT_ADAPTER,
        verify_ssl=not is_ssl_verify_disabled_by_env(environ),
        verbose=environ.get(ENV_VERBOSE, "").strip().lower() in _TRUTHY,
    )

    timeout = environ.get(ENV_TIMEOUT, "").strip()
    if timeout:
        config.timeout = _parse_float(ENV_TIMEOUT, timeout)

    chunk_size = environ.get(ENV_CHUNK_SIZE, "").strip()
    if chunk_size:
        config.chunk_size = _parse_positive_int(ENV_CHUNK_SIZE, chunk_size)

    if not config.verify_ssl:
        logger.warning("load_config: SSL verification disabled by environment")

    logger.debug(f"load_config: resolved {config}")
    return config
