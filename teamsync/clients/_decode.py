"""Decoding helpers shared by the resource clients."""

from typing import Any

import httpx

from teamsync.exceptions import ProtocolError
from teamsync.transport import HTTPTransport


def decode_list(response: httpx.Response) -> list[Any]:
    """Decode one page of a REST listing."""
    items = HTTPTransport.decode(response)
    if not isinstance(items, list):
        raise ProtocolError(f"Expected a list page from {response.request.url}")
    return items


def require(data: Any, key: str) -> Any:
    """Get a mandatory field, treating its absence as a protocol violation."""
    try:
        return data[key]
    except (KeyError, TypeError) as e:
        raise ProtocolError(f"Missing {key!r} in {data!r}") from e


def parse_enum(enum_cls: Any, value: Any) -> Any:
    """Parse a wire value into ``enum_cls``."""
    try:
        return enum_cls(value)
    except ValueError as e:
        raise ProtocolError(f"Unknown {enum_cls.__name__} value: {value!r}") from e
