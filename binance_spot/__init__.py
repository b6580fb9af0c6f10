"""Binance Spot REST client for sub-account and leveraged-token endpoints."""

from binance_spot.exchange.errors import (
    ApiError,
    BinanceError,
    ClientError,
    ConfigurationError,
    ConnectionError,
    RequiredParameterError,
    ServerError,
)
from binance_spot.exchange.session import Session, SessionConfig
from binance_spot.exchange.validation import require_param
from binance_spot.spot import Spot

__all__ = [
    "ApiError",
    "BinanceError",
    "ClientError",
    "ConfigurationError",
    "ConnectionError",
    "RequiredParameterError",
    "ServerError",
    "Session",
    "SessionConfig",
    "Spot",
    "require_param",
]
