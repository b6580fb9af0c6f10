"""Exchange plumbing: signed session, validation and error types."""

from binance_spot.exchange.session import Session, SessionConfig
from binance_spot.exchange.validation import require_param

__all__ = [
    "Session",
    "SessionConfig",
    "require_param",
]
