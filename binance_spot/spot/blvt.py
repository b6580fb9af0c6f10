"""Binance Leveraged Token (BLVT) endpoints."""

from __future__ import annotations

from typing import Any, Optional

from binance_spot.exchange.session import Session
from binance_spot.spot._dispatch import limited_call, signed_call


class Blvt:
    """Token info, subscription and redemption of leveraged tokens."""

    session: Session

    def token_info(self, **kwargs: Any) -> Any:
        """Token details, optionally for one ``tokenName`` (e.g. "BTCDOWN").

        GET /sapi/v1/blvt/tokenInfo (API key only, not signed)
        """
        return limited_call(self.session, "GET", "/sapi/v1/blvt/tokenInfo", optional=kwargs)

    def subscribe(self, tokenName: Optional[str] = None, cost: Optional[float] = None, **kwargs: Any) -> Any:
        """Subscribe to a leveraged token, spending ``cost`` in USDT.

        POST /sapi/v1/blvt/subscribe
        """
        return signed_call(
            self.session,
            "POST",
            "/sapi/v1/blvt/subscribe",
            {"tokenName": tokenName, "cost": cost},
            kwargs,
        )

    def subscription_record(self, **kwargs: Any) -> Any:
        """GET /sapi/v1/blvt/subscribe/record

        Optional: ``tokenName``, ``id``, ``startTime``, ``endTime``, ``limit``
        (default 1000, max 1000).
        """
        return signed_call(self.session, "GET", "/sapi/v1/blvt/subscribe/record", optional=kwargs)

    def redeem(self, tokenName: Optional[str] = None, amount: Optional[float] = None, **kwargs: Any) -> Any:
        """Redeem ``amount`` of a leveraged token.

        POST /sapi/v1/blvt/redeem

        Parameters
        ----------
        tokenName:
            Leveraged token, e.g. "BTCDOWN".
        amount:
            Quantity of the token to redeem.
        """
        return signed_call(
            self.session,
            "POST",
            "/sapi/v1/blvt/redeem",
            {"tokenName": tokenName, "amount": amount},
            kwargs,
        )

    def redemption_record(self, **kwargs: Any) -> Any:
        """GET /sapi/v1/blvt/redeem/record"""
        return signed_call(self.session, "GET", "/sapi/v1/blvt/redeem/record", optional=kwargs)

    def user_limit(self, **kwargs: Any) -> Any:
        """Subscription and redemption limits of the user. GET /sapi/v1/blvt/userLimit"""
        return signed_call(self.session, "GET", "/sapi/v1/blvt/userLimit", optional=kwargs)
