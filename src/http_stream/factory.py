"""
Factory functions for creating transport adapters.

The adapter backend is chosen by name, either explicitly or from
AdapterConfig.adapter (HTTP_STREAM_ADAPTER in the environment). The
process-wide default adapter is built once on first use.
"""
import logging
import threading
from typing import Any, Dict, Optional, Type, Union

from .adapters.httpx_adapter import AsyncHttpxAdapter, HttpxAdapter
from .config import AdapterConfig, load_config
from .types import AdapterName

logger = logging.getLogger("http_stream.factory")

ADAPTERS: Dict[AdapterName, Type[Union[HttpxAdapter, AsyncHttpxAdapter]]] = {
    HttpxAdapter.name: HttpxAdapter,
    AsyncHttpxAdapter.name: AsyncHttpxAdapter,
}

_default_adapter: Optional[Union[HttpxAdapter, AsyncHttpxAdapter]] = None
_default_lock = threading.Lock()


def create_adapter(
    name: Optional[AdapterName] = None,
    config: Optional[AdapterConfig] = None,
    httpx_client: Optional[Any] = None,
) -> Union[HttpxAdapter, AsyncHttpxAdapter]:
    """
    Create a transport adapter.

    Args:
        name: Adapter name ("httpx" or "httpx_async"). Defaults to config.adapter.
        config: Adapter configuration. Defaults to AdapterConfig().
        httpx_client: Pre-configured httpx.Client / httpx.AsyncClient.

    Returns:
        HttpxAdapter or AsyncHttpxAdapter.

    Example:
        adapter = create_adapter("httpx")
        request = new_request("GET", "https://example.com/file.bin")
        with open("file.bin", "wb") as f:
            for chunk in adapter.stream(request):
                f.write(chunk)
    """
    config = config or AdapterConfig()
    name = name or config.adapter

    adapter_cls = ADAPTERS.get(name)
    if adapter_cls is None:
        raise ValueError(f"Unknown adapter: {name}. Must be one of: {sorted(ADAPTERS)}")

    logger.debug(f"create_adapter: name={name}, injected_client={httpx_client is not None}")
    return adapter_cls(config=config, httpx_client=httpx_client)


def get_default_adapter() -> Union[HttpxAdapter, AsyncHttpxAdapter]:
    """Process-wide adapter built from the environment on first use."""
    global _default_adapter
    with _default_lock:
        if _default_adapter is None:
            config = load_config()
            _default_adapter = create_adapter(config=config)
            logger.info(f"get_default_adapter: selected adapter={config.adapter}")
        return _default_adapter


def reset_default_adapter() -> Optional[AsyncHttpxAdapter]:
    """
    Forget the process-wide adapter.

    A synchronous adapter is closed here. An async adapter cannot be closed
    from sync code, so it is returned for the caller to ``await close()``.
    """
    global _default_adapter
    with _default_lock:
        adapter, _default_adapter = _default_adapter, None
    if isinstance(adapter, HttpxAdapter):
        adapter.close()
        return None
    return adapter
