"""Shared fixtures: a fake exchange behind httpx.MockTransport and a fixed clock."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import httpx
import pytest

from binance_spot.exchange.session import Session, SessionConfig
from binance_spot.spot import Spot

API_KEY = "test-api-key"
API_SECRET = "test-api-secret"
FIXED_TS = 1499827319559


@dataclass
class FakeExchange:
    """Records every request and answers with a canned response."""

    status_code: int = 200
    payload: Any = field(default_factory=lambda: {"success": True})
    text: str = ""
    requests: List[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


def raw_query(request: httpx.Request) -> str:
    query = request.url.query
    return query.decode("ascii") if isinstance(query, bytes) else str(query)


def split_signature(request: httpx.Request) -> Tuple[str, str]:
    """Return (signed payload, signature) from a request's query string."""
    payload, _, signature = raw_query(request).rpartition("&signature=")
    return payload, signature


def expected_signature(payload: str, secret: str = API_SECRET) -> str:
    return hmac.new(secret.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256).hexdigest()


def sent_params(request: httpx.Request) -> Dict[str, str]:
    return dict(request.url.params.multi_items())


def wire(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@pytest.fixture
def exchange() -> FakeExchange:
    return FakeExchange()


@pytest.fixture
def session(exchange: FakeExchange) -> Session:
    sess = Session(
        SessionConfig(api_key=API_KEY, api_secret=API_SECRET),
        transport=exchange.transport,
        clock=lambda: FIXED_TS,
    )
    yield sess
    sess.close()


@pytest.fixture
def client(session: Session) -> Spot:
    return Spot(session=session)
