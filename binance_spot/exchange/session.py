"""Binance REST session: request signing and single-shot dispatch.

Every call produces exactly one HTTP request. Retries, backoff and TLS belong
to the httpx transport; this layer only signs, sends and maps failures onto
the error taxonomy in `binance_spot.exchange.errors`.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import time
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, List, Mapping, Optional
from urllib.parse import urlencode

import httpx

from binance_spot.exchange.errors import ApiError, ConfigurationError, ConnectionError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.binance.com"
TESTNET_BASE_URL = "https://testnet.binance.vision"
MAX_RECV_WINDOW = 60000
SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")


@dataclass(frozen=True)
class SessionConfig:
    api_key: Optional[str] = None
    api_secret: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0
    # Injected only when the caller does not pass its own recvWindow.
    recv_window: Optional[int] = None

    def __repr__(self) -> str:
        return (
            f"SessionConfig(api_key={'***' if self.api_key else None}, "
            f"api_secret={'***' if self.api_secret else None}, "
            f"base_url={self.base_url!r}, timeout_seconds={self.timeout_seconds!r}, "
            f"recv_window={self.recv_window!r})"
        )


class Session:
    """Signed Binance endpoints wrapper shared by every endpoint mixin."""

    def __init__(
        self,
        config: SessionConfig,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self._cfg = config
        self._clock = clock or (lambda: int(time.time() * 1000))
        headers = {"Content-Type": "application/json;charset=utf-8"}
        if config.api_key:
            headers["X-MBX-APIKEY"] = config.api_key
        self._client = httpx.Client(
            base_url=str(config.base_url).rstrip("/"),
            timeout=float(config.timeout_seconds),
            headers=headers,
            transport=transport,
        )

    @property
    def config(self) -> SessionConfig:
        return self._cfg

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #
    def sign_request(self, method: str, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Send a USER_DATA / TRADE request carrying `timestamp` and `signature`.

        Parameters
        ----------
        method:
            One of GET, POST, PUT, DELETE (case-insensitive).
        path:
            Endpoint path starting with the API prefix, e.g. "/sapi/v1/sub-account/list".
        params:
            Endpoint parameters in the order they should be signed. `None`
            values are dropped; everything else is sent as given.
        """
        method_u = self._check_method(method)
        self._require_api_key()
        if not self._cfg.api_secret:
            raise ConfigurationError("API secret required for signed endpoints.")

        query = self._prepare_params(params)
        if "recvWindow" in query:
            if _exceeds_recv_window(query["recvWindow"]):
                logger.warning(
                    "recvWindow=%s exceeds the documented maximum of %s ms; sending unchanged.",
                    query["recvWindow"],
                    MAX_RECV_WINDOW,
                )
        elif self._cfg.recv_window is not None:
            query["recvWindow"] = int(self._cfg.recv_window)
        query["timestamp"] = self._clock()

        query_str = encode_params(query)
        signed_query = f"{query_str}&signature={self.sign(query_str)}"
        return self._dispatch(method_u, path, signed_query, list(query))

    def limited_request(self, method: str, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Send a request authenticated by API key only (no timestamp, no signature)."""
        method_u = self._check_method(method)
        self._require_api_key()
        query = self._prepare_params(params)
        return self._dispatch(method_u, path, encode_params(query), list(query))

    def sign(self, payload: str) -> str:
        """Return the hex HMAC-SHA256 of `payload` keyed with the API secret."""
        if not self._cfg.api_secret:
            raise ConfigurationError("API secret required for signed endpoints.")
        return hmac.new(
            self._cfg.api_secret.encode("utf-8"),
            payload.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #
    @staticmethod
    def _check_method(method: str) -> str:
        method_u = str(method or "").upper()
        if method_u not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported method: {method}")
        return method_u

    def _require_api_key(self) -> None:
        if not self._cfg.api_key:
            raise ConfigurationError("API key required for authenticated endpoints.")

    @staticmethod
    def _prepare_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        return {key: value for key, value in dict(params or {}).items() if value is not None}

    def _dispatch(self, method: str, path: str, query_str: str, param_names: List[str]) -> Any:
        url = f"{path}?{query_str}" if query_str else path
        logger.debug("%s %s params=%s", method, path, param_names)
        try:
            resp = self._client.request(method, url)
        except httpx.TransportError as exc:
            raise ConnectionError(f"{method} {path} failed: {exc}") from exc

        weights = {k: v for k, v in resp.headers.items() if k.lower().startswith("x-mbx-used-weight")}
        if weights:
            logger.debug("%s %s used weight: %s", method, path, weights)

        if not resp.is_success:
            error = ApiError.from_response(resp.status_code, resp.text, dict(resp.headers))
            logger.warning("%s %s rejected: %s", method, path, error)
            raise error
        return resp.json()


def encode_params(params: Mapping[str, Any]) -> str:
    """URL-encode `params` in insertion order, the exact string that gets signed."""
    return urlencode([(key, _format_value(value)) for key, value in params.items()], doseq=True)


def _format_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_number(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (list, tuple)):
        return [_format_value(item) for item in value]
    return value


def _format_number(value: float) -> str:
    # Binance rejects scientific notation such as 1e-05.
    text = repr(float(value))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def _exceeds_recv_window(value: Any) -> bool:
    try:
        return int(value) > MAX_RECV_WINDOW
    except (TypeError, ValueError):
        return False
