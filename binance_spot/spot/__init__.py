"""Spot REST endpoint groups and the client that composes them."""

from .blvt import Blvt
from .client import Spot
from .subaccount import Subaccount

__all__ = ["Blvt", "Spot", "Subaccount"]
