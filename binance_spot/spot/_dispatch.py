"""Shared shape of every endpoint method: validate, merge, send."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from binance_spot.exchange.session import Session
from binance_spot.exchange.validation import require_param


def build_params(
    required: Optional[Mapping[str, Any]] = None,
    optional: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Validate `required` in declared order and merge it over `optional`.

    The first missing required parameter is raised; required values win on
    key collision.
    """
    required = required or {}
    for name, value in required.items():
        require_param(name, value)
    params: Dict[str, Any] = dict(optional or {})
    params.update(required)
    return params


def signed_call(
    session: Session,
    method: str,
    path: str,
    required: Optional[Mapping[str, Any]] = None,
    optional: Optional[Mapping[str, Any]] = None,
) -> Any:
    return session.sign_request(method, path, build_params(required, optional))


def limited_call(
    session: Session,
    method: str,
    path: str,
    required: Optional[Mapping[str, Any]] = None,
    optional: Optional[Mapping[str, Any]] = None,
) -> Any:
    return session.limited_request(method, path, build_params(required, optional))
