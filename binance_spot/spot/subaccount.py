"""Sub-account endpoints (master account and sub-account scopes).

Every method is a 1:1 mapping to one signed REST call. Optional parameters
are forwarded untouched through ``**kwargs`` using their wire names, e.g.
``recvWindow`` (documented maximum 60000, enforced by the server only).
"""

from __future__ import annotations

from typing import Any, Optional

from binance_spot.exchange.session import Session
from binance_spot.spot._dispatch import signed_call

# futuresType
USDT_MARGINED_FUTURES = 1
COIN_MARGINED_FUTURES = 2

# sub_account_futures_transfer `type`
SPOT_TO_USDT_FUTURES = 1
USDT_FUTURES_TO_SPOT = 2
SPOT_TO_COIN_FUTURES = 3
COIN_FUTURES_TO_SPOT = 4

# sub_account_margin_transfer `type`
SPOT_TO_MARGIN = 1
MARGIN_TO_SPOT = 2

# universal_transfer account types
ACCOUNT_TYPES = ("SPOT", "USDT_FUTURE", "COIN_FUTURE")


class Subaccount:
    """Sub-account management, transfers and asset queries."""

    session: Session

    # ------------------------------------------------------------------ #
    # Sub-account lifecycle and listing
    # ------------------------------------------------------------------ #
    def create_virtual_sub_account(self, subAccountString: Optional[str] = None, **kwargs: Any) -> Any:
        """Create a virtual sub-account under the master account.

        POST /sapi/v1/sub-account/virtualSubAccount

        The API key needs the "trade" permission.
        """
        return signed_call(
            self.session,
            "POST",
            "/sapi/v1/sub-account/virtualSubAccount",
            {"subAccountString": subAccountString},
            kwargs,
        )

    def get_sub_account_list(self, **kwargs: Any) -> Any:
        """Query sub-account list.

        GET /sapi/v1/sub-account/list

        Optional: ``email``, ``isFreeze`` ("true"/"false"), ``page``, ``limit``.
        """
        return signed_call(self.session, "GET", "/sapi/v1/sub-account/list", optional=kwargs)

    def sub_account_status(self, **kwargs: Any) -> Any:
        """Margin/futures status of sub-accounts. GET /sapi/v1/sub-account/status"""
        return signed_call(self.session, "GET", "/sapi/v1/sub-account/status", optional=kwargs)

    # ------------------------------------------------------------------ #
    # Transfer history
    # ------------------------------------------------------------------ #
    def get_sub_account_spot_transfer_history(self, **kwargs: Any) -> Any:
        """Spot asset transfer history between master and sub-accounts.

        GET /sapi/v1/sub-account/sub/transfer/history

        ``fromEmail`` and ``toEmail`` cannot be sent together; without either the
        server returns transfers from the master account. Other optional
        parameters: ``startTime``, ``endTime``, ``page`` (default 1),
        ``limit`` (default 500).
        """
        return signed_call(self.session, "GET", "/sapi/v1/sub-account/sub/transfer/history", optional=kwargs)

    def get_sub_account_futures_transfer_history(
        self,
        email: Optional[str] = None,
        futuresType: Optional[int] = None,
        **kwargs: Any,
    ) -> Any:
        """Futures asset transfer history of a sub-account.

        GET /sapi/v1/sub-account/futures/internalTransfer

        Parameters
        ----------
        email:
            Sub-account email.
        futuresType:
            1 for USDT-margined, 2 for coin-margined futures.
        kwargs:
            ``startTime``/``endTime`` (defaults to the last 100 days), ``page``,
            ``limit`` (default 50, max 500), ``recvWindow``.
        """
        return signed_call(
            self.session,
            "GET",
            "/sapi/v1/sub-account/futures/internalTransfer",
            {"email": email, "futuresType": futuresType},
            kwargs,
        )

    def sub_account_transfer_sub_account_history(self, **kwargs: Any) -> Any:
        """Transfer history seen from a sub-account.

        GET /sapi/v1/sub-account/transfer/subUserHistory

        Optional: ``asset``, ``type`` (1 transfer in, 2 transfer out),
        ``startTime``, ``endTime``, ``limit``.
        """
        return signed_call(self.session, "GET", "/sapi/v1/sub-account/transfer/subUserHistory", optional=kwargs)

    def universal_transfer_history(self, **kwargs: Any) -> Any:
        """GET /sapi/v1/sub-account/universalTransfer (``limit`` default and max 500)."""
        return signed_call(self.session, "GET", "/sapi/v1/sub-account/universalTransfer", optional=kwargs)

    # ------------------------------------------------------------------ #
    # Transfers
    # ------------------------------------------------------------------ #
    def sub_account_futures_internal_transfer(
        self,
        fromEmail: Optional[str] = None,
        toEmail: Optional[str] = None,
        futuresType: Optional[int] = None,
        asset: Optional[str] = None,
        amount: Optional[float] = None,
        **kwargs: Any,
    ) -> Any:
        """Move futures assets between two sub-accounts.

        POST /sapi/v1/sub-account/futures/internalTransfer
        """
        return signed_call(
            self.session,
            "POST",
            "/sapi/v1/sub-account/futures/internalTransfer",
            {
                "fromEmail": fromEmail,
                "toEmail": toEmail,
                "futuresType": futuresType,
                "asset": asset,
                "amount": amount,
            },
            kwargs,
        )

    def sub_account_futures_transfer(
        self,
        email: Optional[str] = None,
        asset: Optional[str] = None,
        amount: Optional[float] = None,
        type: Optional[int] = None,
        **kwargs: Any,
    ) -> Any:
        """Transfer between a sub-account's spot and futures wallets.

        POST /sapi/v1/sub-account/futures/transfer

        ``type``: 1 spot to USDT-margined futures, 2 USDT-margined futures to
        spot, 3 spot to coin-margined futures, 4 coin-margined futures to spot.
        """
        return signed_call(
            self.session,
            "POST",
            "/sapi/v1/sub-account/futures/transfer",
            {"email": email, "asset": asset, "amount": amount, "type": type},
            kwargs,
        )

    def sub_account_margin_transfer(
        self,
        email: Optional[str] = None,
        asset: Optional[str] = None,
        amount: Optional[float] = None,
        type: Optional[int] = None,
        **kwargs: Any,
    ) -> Any:
        """Transfer between a sub-account's spot and margin wallets.

        POST /sapi/v1/sub-account/margin/transfer

        ``type``: 1 spot to margin, 2 margin to spot.
        """
        return signed_call(
            self.session,
            "POST",
            "/sapi/v1/sub-account/margin/transfer",
            {"email": email, "asset": asset, "amount": amount, "type": type},
            kwargs,
        )

    def sub_account_transfer_to_sub(
        self,
        toEmail: Optional[str] = None,
        asset: Optional[str] = None,
        amount: Optional[Any] = None,
        **kwargs: Any,
    ) -> Any:
        """Transfer to another sub-account of the same master. POST /sapi/v1/sub-account/transfer/subToSub"""
        return signed_call(
            self.session,
            "POST",
            "/sapi/v1/sub-account/transfer/subToSub",
            {"toEmail": toEmail, "asset": asset, "amount": amount},
            kwargs,
        )

    def sub_account_transfer_to_master(
        self,
        asset: Optional[str] = None,
        amount: Optional[float] = None,
        **kwargs: Any,
    ) -> Any:
        """Transfer from the calling sub-account to its master. POST /sapi/v1/sub-account/transfer/subToMaster"""
        return signed_call(
            self.session,
            "POST",
            "/sapi/v1/sub-account/transfer/subToMaster",
            {"asset": asset, "amount": amount},
            kwargs,
        )

    def universal_transfer(
        self,
        fromAccountType: Optional[str] = None,
        toAccountType: Optional[str] = None,
        asset: Optional[str] = None,
        amount: Optional[float] = None,
        **kwargs: Any,
    ) -> Any:
        """Universal transfer between account types of master or sub-accounts.

        POST /sapi/v1/sub-account/universalTransfer

        Account types are "SPOT", "USDT_FUTURE" and "COIN_FUTURE"; futures to
        futures is not supported. ``fromEmail``/``toEmail`` default to the
        master account when omitted. The API key needs the "internal transfer"
        permission.
        """
        return signed_call(
            self.session,
            "POST",
            "/sapi/v1/sub-account/universalTransfer",
            {
                "fromAccountType": fromAccountType,
                "toAccountType": toAccountType,
                "asset": asset,
                "amount": amount,
            },
            kwargs,
        )

    # ------------------------------------------------------------------ #
    # Assets and deposits
    # ------------------------------------------------------------------ #
    def get_sub_account_assets(self, email: Optional[str] = None, **kwargs: Any) -> Any:
        """GET /sapi/v3/sub-account/assets"""
        return signed_call(self.session, "GET", "/sapi/v3/sub-account/assets", {"email": email}, kwargs)

    def get_sub_account_spot_summary(self, **kwargs: Any) -> Any:
        """BTC-valued spot asset summary of sub-accounts.

        GET /sapi/v1/sub-account/spotSummary

        Optional: ``email``, ``page`` (default 1), ``size`` (default 10, max 20).
        """
        return signed_call(self.session, "GET", "/sapi/v1/sub-account/spotSummary", optional=kwargs)

    def sub_account_deposit_address(
        self,
        email: Optional[str] = None,
        coin: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        """Deposit address of a sub-account (optional ``network``).

        GET /sapi/v1/capital/deposit/subAddress
        """
        return signed_call(
            self.session,
            "GET",
            "/sapi/v1/capital/deposit/subAddress",
            {"email": email, "coin": coin},
            kwargs,
        )

    def sub_account_deposit_history(self, email: Optional[str] = None, **kwargs: Any) -> Any:
        """Deposit history of a sub-account.

        GET /sapi/v1/capital/deposit/subHisrec

        Optional: ``coin``, ``status``, ``startTime``, ``endTime``, ``limit``, ``offset``.
        """
        return signed_call(self.session, "GET", "/sapi/v1/capital/deposit/subHisrec", {"email": email}, kwargs)

    # ------------------------------------------------------------------ #
    # Margin
    # ------------------------------------------------------------------ #
    def sub_account_enable_margin(self, email: Optional[str] = None, **kwargs: Any) -> Any:
        """POST /sapi/v1/sub-account/margin/enable"""
        return signed_call(self.session, "POST", "/sapi/v1/sub-account/margin/enable", {"email": email}, kwargs)

    def sub_account_margin_account(self, email: Optional[str] = None, **kwargs: Any) -> Any:
        """GET /sapi/v1/sub-account/margin/account"""
        return signed_call(self.session, "GET", "/sapi/v1/sub-account/margin/account", {"email": email}, kwargs)

    def sub_account_margin_account_summary(self, **kwargs: Any) -> Any:
        """GET /sapi/v1/sub-account/margin/accountSummary"""
        return signed_call(self.session, "GET", "/sapi/v1/sub-account/margin/accountSummary", optional=kwargs)

    # ------------------------------------------------------------------ #
    # Futures
    # ------------------------------------------------------------------ #
    def sub_account_enable_futures(self, email: Optional[str] = None, **kwargs: Any) -> Any:
        """POST /sapi/v1/sub-account/futures/enable"""
        return signed_call(self.session, "POST", "/sapi/v1/sub-account/futures/enable", {"email": email}, kwargs)

    def sub_account_futures_account(
        self,
        email: Optional[str] = None,
        futuresType: Optional[int] = None,
        **kwargs: Any,
    ) -> Any:
        """Futures account detail of a sub-account. GET /sapi/v2/sub-account/futures/account"""
        return signed_call(
            self.session,
            "GET",
            "/sapi/v2/sub-account/futures/account",
            {"email": email, "futuresType": futuresType},
            kwargs,
        )

    def sub_account_futures_account_summary(self, futuresType: Optional[int] = None, **kwargs: Any) -> Any:
        """Futures account summary across sub-accounts.

        GET /sapi/v2/sub-account/futures/accountSummary

        Optional: ``page`` (default 1), ``limit`` (default 10, max 20).
        """
        return signed_call(
            self.session,
            "GET",
            "/sapi/v2/sub-account/futures/accountSummary",
            {"futuresType": futuresType},
            kwargs,
        )

    def sub_account_futures_position_risk(
        self,
        email: Optional[str] = None,
        futuresType: Optional[int] = None,
        **kwargs: Any,
    ) -> Any:
        """GET /sapi/v2/sub-account/futures/positionRisk"""
        return signed_call(
            self.session,
            "GET",
            "/sapi/v2/sub-account/futures/positionRisk",
            {"email": email, "futuresType": futuresType},
            kwargs,
        )

    # ------------------------------------------------------------------ #
    # Leveraged tokens
    # ------------------------------------------------------------------ #
    def sub_account_enable_blvt(
        self,
        email: Optional[str] = None,
        enableBlvt: Optional[bool] = None,
        **kwargs: Any,
    ) -> Any:
        """Enable leveraged tokens for a sub-account (``enableBlvt`` only accepts true for now).

        POST /sapi/v1/sub-account/blvt/enable
        """
        return signed_call(
            self.session,
            "POST",
            "/sapi/v1/sub-account/blvt/enable",
            {"email": email, "enableBlvt": enableBlvt},
            kwargs,
        )

    # ------------------------------------------------------------------ #
    # Managed sub-accounts (investor master account)
    # ------------------------------------------------------------------ #
    def deposit_to_sub_account(
        self,
        toEmail: Optional[str] = None,
        asset: Optional[str] = None,
        amount: Optional[float] = None,
        **kwargs: Any,
    ) -> Any:
        """POST /sapi/v1/managed-subaccount/deposit"""
        return signed_call(
            self.session,
            "POST",
            "/sapi/v1/managed-subaccount/deposit",
            {"toEmail": toEmail, "asset": asset, "amount": amount},
            kwargs,
        )

    def sub_account_asset_details(self, email: Optional[str] = None, **kwargs: Any) -> Any:
        """GET /sapi/v1/managed-subaccount/asset"""
        return signed_call(self.session, "GET", "/sapi/v1/managed-subaccount/asset", {"email": email}, kwargs)

    def withdraw_from_sub_account(
        self,
        fromEmail: Optional[str] = None,
        asset: Optional[str] = None,
        amount: Optional[float] = None,
        **kwargs: Any,
    ) -> Any:
        """Withdraw assets from a managed sub-account (optional ``transferDate``).

        POST /sapi/v1/managed-subaccount/withdraw
        """
        return signed_call(
            self.session,
            "POST",
            "/sapi/v1/managed-subaccount/withdraw",
            {"fromEmail": fromEmail, "asset": asset, "amount": amount},
            kwargs,
        )
