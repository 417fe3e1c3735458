"""Value types and the message base class for crossbridge."""

from __future__ import annotations

from .address import ADDR_LEN, ETH_ADDR_LEN, AccAddress, EthereumAddress
from .base import ROUTE_BRIDGE, BridgeMsg
from .coin import Coin
from .fields import FixedInt, Int8, Int64
from .status import BindStatus

__all__ = [
    "ADDR_LEN",
    "ETH_ADDR_LEN",
    "AccAddress",
    "EthereumAddress",
    "Coin",
    "BindStatus",
    "BridgeMsg",
    "ROUTE_BRIDGE",
    "FixedInt",
    "Int8",
    "Int64",
]
