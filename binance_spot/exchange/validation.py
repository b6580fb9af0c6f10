"""Pre-flight checks applied to endpoint arguments before a request is built."""

from __future__ import annotations

from typing import Any

from binance_spot.exchange.errors import RequiredParameterError


def is_empty(value: Any) -> bool:
    """Return True for None, blank strings and empty containers.

    Zero and False are real values on the wire and count as present.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def require_param(name: str, value: Any) -> None:
    """Raise `RequiredParameterError` naming `name` when `value` is empty."""
    if is_empty(value):
        raise RequiredParameterError(name)
