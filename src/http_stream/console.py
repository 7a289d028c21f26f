"""
Console tracing for http_stream adapters.

Prints request and response summaries as Rich panels. Header values that
carry credentials are masked before printing.
"""
from typing import Iterable, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

SENSITIVE_HEADERS = {"authorization", "proxy-authorization", "x-api-key", "cookie"}

console = Console(stderr=True)


def mask_sensitive(value: Optional[str], show_chars: int = 4) -> str:
    """
    Mask sensitive values for logging.

    mask_sensitive('secretpassword123')  # "secr***"
    mask_sensitive('abc')                # "***"
    mask_sensitive(None)                 # "<none>"
    """
    if not value:
        return "<none>"
    if len(value) <= show_chars:
        return "*" * len(value)
    return value[:show_chars] + "***"


def mask_auth_header(value: Optional[str], show_chars: int = 15) -> str:
    """Mask an auth header value, keeping the scheme prefix readable."""
    return mask_sensitive(value, show_chars)


def mask_headers(headers: Iterable[Tuple[str, str]]) -> List[Tuple[str, str]]:
    """Return header pairs with credential-bearing values masked."""
    return [
        (key, mask_auth_header(value) if key.lower() in SENSITIVE_HEADERS else value)
        for key, value in headers
    ]


def print_request(method: str, url: str, headers: Iterable[Tuple[str, str]]) -> None:
    """Print an outgoing request panel."""
    lines = [f"[bold cyan]{method}[/bold cyan] {escape(url)}"]
    for key, value in mask_headers(headers):
        lines.append(f"[dim]{escape(key)}:[/dim] {escape(str(value))}")
    console.print(Panel("\n".join(lines), title="[bold blue]Request[/bold blue]"))


def print_response(status_code: int, reason: str, url: str) -> None:
    """Print a response status panel."""
    color = "green" if 200 <= status_code < 300 else "red"
    console.print(
        Panel(
            f"[bold {color}]{status_code}[/bold {color}] {reason}",
            title=f"[bold blue]Response[/bold blue] ({escape(url)})",
        )
    )
