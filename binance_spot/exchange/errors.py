"""Shared error types for local validation, transport and API failures."""

from __future__ import annotations

import builtins
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


class BinanceError(Exception):
    """Base class for every error raised by this package."""


@dataclass
class RequiredParameterError(BinanceError, ValueError):
    """Raised before any request is built when a mandatory parameter is absent.

    Attributes
    ----------
    param:
        Wire name of the missing parameter (e.g. "subAccountString").
    """

    param: str

    def __post_init__(self) -> None:
        super().__init__(self.param)

    def __str__(self) -> str:
        return f"'{self.param}' is required but was missing or empty"


@dataclass
class ConfigurationError(BinanceError):
    """Raised when the session lacks the credentials a call needs."""

    reason: str

    def __post_init__(self) -> None:
        super().__init__(self.reason)

    def __str__(self) -> str:
        return self.reason


class ConnectionError(BinanceError, builtins.ConnectionError):
    """Transport-level failure; the original exception is chained as ``__cause__``."""


@dataclass
class ApiError(BinanceError):
    """Raised for any non-2xx response.

    Attributes
    ----------
    status_code:
        HTTP status returned by the server.
    error_code:
        Exchange error code from the body (e.g. -1102), if the body carried one.
    error_message:
        Exchange message, or the raw body text when it was not JSON.
    headers:
        Response headers, kept for rate-limit diagnostics.
    """

    status_code: int
    error_code: Optional[int] = None
    error_message: str = ""
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # args must mirror the init fields for pickling.
        super().__init__(self.status_code, self.error_code, self.error_message)

    def __str__(self) -> str:
        if self.error_code is not None:
            return f"HTTP {self.status_code} [{self.error_code}] {self.error_message}"
        return f"HTTP {self.status_code} {self.error_message}".rstrip()

    @classmethod
    def from_response(cls, status_code: int, body: str, headers: Optional[Dict[str, str]] = None) -> "ApiError":
        """Build the matching subclass from a raw response."""
        error_code: Optional[int] = None
        error_message = body or ""
        try:
            payload: Any = json.loads(body) if body else None
        except ValueError:
            payload = None
        if isinstance(payload, dict) and ("code" in payload or "msg" in payload):
            error_code = payload.get("code")
            error_message = str(payload.get("msg") or "")

        error_cls = ClientError if 400 <= status_code < 500 else ServerError
        return error_cls(
            status_code=status_code,
            error_code=error_code,
            error_message=error_message,
            headers=dict(headers or {}),
        )


class ClientError(ApiError):
    """4xx: the server rejected the request (bad parameters, auth, rate limit)."""


class ServerError(ApiError):
    """5xx or any other unexpected status: the outcome on the server is unknown."""
