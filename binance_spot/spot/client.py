"""Spot REST client composing the endpoint groups over one signed session."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from binance_spot.core.config import session_config_from
from binance_spot.exchange.session import DEFAULT_BASE_URL, Session, SessionConfig
from binance_spot.spot.blvt import Blvt
from binance_spot.spot.subaccount import Subaccount


class Spot(Subaccount, Blvt):
    """Binance Spot client for sub-account and leveraged-token endpoints.

    Holds a single `Session`; every endpoint method issues exactly one request
    through it and returns the decoded body unmodified.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10.0,
        recv_window: Optional[int] = None,
        session: Optional[Session] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if session is None:
            session = Session(
                SessionConfig(
                    api_key=api_key,
                    api_secret=api_secret,
                    base_url=base_url,
                    timeout_seconds=timeout_seconds,
                    recv_window=recv_window,
                ),
                transport=transport,
            )
        self.session = session

    @classmethod
    def from_config(cls, config: Dict[str, Any], *, transport: Optional[httpx.BaseTransport] = None) -> "Spot":
        """Build a client from a loaded configuration mapping (see `load_config`)."""
        return cls(session=Session(session_config_from(config), transport=transport))

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "Spot":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
