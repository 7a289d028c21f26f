"""
Query string decoding, merging and encoding.
"""
import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

from ..types import QueryInput, QueryPairs

logger = logging.getLogger("http_stream.query")


def to_pairs(items: Optional[Any]) -> Tuple[Tuple[Any, Any], ...]:
    """Normalize a mapping or an iterable of pairs into a tuple of pairs."""
    if not items:
        return ()
    if isinstance(items, Mapping):
        return tuple(items.items())
    return tuple((key, value) for key, value in items)


def decode_query(raw: Optional[str]) -> QueryPairs:
    """
    Decode a raw URL query string.

    Form decoding rules apply: "+" is a space, a key without "=" gets an
    empty value and a repeated key keeps its last value. Keys come back in
    lexicographic order.
    """
    if not raw:
        return ()

    decoded: Dict[str, str] = {}
    for key, value in parse_qsl(raw, keep_blank_values=True):
        decoded[key] = value

    return tuple(sorted(decoded.items()))


def _unique(pairs: Iterable[Tuple[Any, Any]]) -> QueryPairs:
    # First position wins, last value wins
    unique: Dict[str, Any] = {}
    for key, value in pairs:
        unique[str(key)] = value
    return tuple(unique.items())


def merge_query(base: QueryPairs, overrides: Optional[QueryInput]) -> QueryPairs:
    """
    Right-biased merge of two query pair sequences.

    Keys present in ``overrides`` are removed from ``base`` and re-appended
    in the order ``overrides`` supplies them. Keys only in ``base`` keep
    their relative order.
    """
    right = _unique(to_pairs(overrides))
    if not right:
        return tuple(base)

    right_keys = {key for key, _ in right}
    kept = tuple((key, value) for key, value in base if key not in right_keys)

    logger.debug(
        f"merge_query: kept={[k for k, _ in kept]}, appended={[k for k, _ in right]}"
    )
    return kept + right


def _render_value(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return ""
    return str(value)


def encode_query(pairs: QueryPairs) -> str:
    """Form-encode query pairs, preserving their order."""
    return urlencode([(str(key), _render_value(value)) for key, value in pairs])


def append_query(path: str, pairs: QueryPairs) -> str:
    """Return ``path`` with the encoded query appended, or ``path`` alone."""
    if not pairs:
        return path
    return f"{path}?{encode_query(pairs)}"
