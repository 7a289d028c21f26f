"""
Transport adapters built on httpx.
"""
import logging
from typing import AsyncGenerator, Generator, Optional

import httpx

from ..config import (
    AdapterConfig,
    DefaultSerializer,
    default_serializer,
    is_ssl_verify_disabled_by_env,
    normalize_timeout,
)
from ..console import print_request, print_response
from ..core.request import Request, url_for
from ..exceptions import AdapterClosedError, HTTPStatusError
from .base import describe, prepare_body, prepare_headers

logger = logging.getLogger("http_stream.adapters.httpx")


def _build_timeout(config: AdapterConfig) -> httpx.Timeout:
    timeout = normalize_timeout(config.timeout)
    return httpx.Timeout(
        connect=timeout.connect,
        read=timeout.read,
        write=timeout.write,
        pool=timeout.connect,
    )


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _resolve_verify(config: AdapterConfig) -> bool:
    # NODE_TLS_REJECT_UNAUTHORIZED=0 or SSL_CERT_VERIFY=0 disable verification for every adapter
    return config.verify_ssl and not is_ssl_verify_disabled_by_env()


class HttpxAdapter:
    """Synchronous adapter streaming responses through httpx.Client."""

    name = "httpx"

    def __init__(
        self,
        config: Optional[AdapterConfig] = None,
        httpx_client: Optional[httpx.Client] = None,
        serializer: Optional[DefaultSerializer] = None,
    ):
        self._config = config or AdapterConfig()
        self._serializer = serializer or default_serializer
        self._verify_ssl = _resolve_verify(self._config)
        if httpx_client is not None:
            self._client = httpx_client
            self._owns_client = False
        else:
            self._client = httpx.Client(
                timeout=_build_timeout(self._config),
                verify=self._verify_ssl,
            )
            self._owns_client = True
        self._closed = False

    def stream(self, request: Request) -> Generator[bytes, None, None]:
        """
        Stream the response body of ``request``.

        Nothing is sent until the returned generator is first advanced. The
        response is closed once the generator is exhausted or closed.
        """
        if self._closed:
            raise AdapterClosedError()
        return self._iter_chunks(request)

    def _iter_chunks(self, request: Request) -> Generator[bytes, None, None]:
        if self._closed:
            raise AdapterClosedError()

        url = url_for(request)
        headers = prepare_headers(request)
        content = prepare_body(request, self._serializer)

        logger.debug(f"HttpxAdapter.stream: {describe(request)}, has_body={content is not None}")
        if self._config.verbose:
            print_request(request.method, url, headers)

        with self._client.stream(
            method=request.method,
            url=url,
            headers=headers,
            content=content,
        ) as response:
            logger.debug(f"HttpxAdapter.stream: status={response.status_code}")
            if self._config.verbose:
                print_response(response.status_code, response.reason_phrase or "", url)

            if self._config.raise_for_status and not _is_success(response.status_code):
                text = response.read()
                raise HTTPStatusError(
                    response.status_code, url, text.decode("utf-8", errors="replace")
                )

            yield from response.iter_bytes(chunk_size=self._config.chunk_size)

    def close(self) -> None:
        """Close the adapter, and the httpx client if the adapter created it."""
        self._closed = True
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxAdapter":
        """Enter sync context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit sync context manager."""
        self.close()


class AsyncHttpxAdapter:
    """Asynchronous adapter streaming responses through httpx.AsyncClient."""

    name = "httpx_async"

    def __init__(
        self,
        config: Optional[AdapterConfig] = None,
        httpx_client: Optional[httpx.AsyncClient] = None,
        serializer: Optional[DefaultSerializer] = None,
    ):
        self._config = config or AdapterConfig()
        self._serializer = serializer or default_serializer
        self._verify_ssl = _resolve_verify(self._config)
        if httpx_client is not None:
            self._client = httpx_client
            self._owns_client = False
        else:
            self._client = httpx.AsyncClient(
                timeout=_build_timeout(self._config),
                verify=self._verify_ssl,
            )
            self._owns_client = True
        self._closed = False

    def stream(self, request: Request) -> AsyncGenerator[bytes, None]:
        """
        Stream the response body of ``request``.

        Nothing is sent until the returned async generator is first
        advanced.
        """
        if self._closed:
            raise AdapterClosedError()
        return self._aiter_chunks(request)

    async def _aiter_chunks(self, request: Request) -> AsyncGenerator[bytes, None]:
        if self._closed:
            raise AdapterClosedError()

        url = url_for(request)
        headers = prepare_headers(request)
        content = prepare_body(request, self._serializer)

        logger.debug(f"AsyncHttpxAdapter.stream: {describe(request)}, has_body={content is not None}")
        if self._config.verbose:
            print_request(request.method, url, headers)

        async with self._client.stream(
            method=request.method,
            url=url,
            headers=headers,
            content=content,
        ) as response:
            logger.debug(f"AsyncHttpxAdapter.stream: status={response.status_code}")
            if self._config.verbose:
                print_response(response.status_code, response.reason_phrase or "", url)

            if self._config.raise_for_status and not _is_success(response.status_code):
                text = await response.aread()
                raise HTTPStatusError(
                    response.status_code, url, text.decode("utf-8", errors="replace")
                )

            async for chunk in response.aiter_bytes(chunk_size=self._config.chunk_size):
                yield chunk

    async def close(self) -> None:
        """Close the adapter, and the httpx client if the adapter created it."""
        self._closed = True
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpxAdapter":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()
