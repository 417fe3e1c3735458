"""crossbridge: Cross-chain bridge message protocol

Messages, validation rules and canonical sign bytes for a bridge between a
native chain and an external EVM-compatible chain.

Key Features:
- Five pydantic-based bridge messages (transfer in/out, transfer-out timeout,
  bind, update bind)
- Field-level ``validate_basic()`` rules checked before anything is signed
- Canonical JSON sign bytes with stable wire names
- A client facade that hands validated messages to a pluggable broadcaster

Quick Start:
    >>> from crossbridge import AccAddress, BindMsg, EthereumAddress
    >>>
    >>> msg = BindMsg(
    ...     from_address=AccAddress(bytes(20)),
    ...     symbol="ETH.USDT",
    ...     amount=100,
    ...     contract_address=EthereumAddress.from_hex("0x" + "00" * 19 + "01"),
    ...     contract_decimals=18,
    ...     expire_time=9999999999,
    ... )
    >>> msg.validate_basic()
    >>> data = msg.sign_bytes()
"""

from __future__ import annotations

from logging import NullHandler, getLogger

from .client import (
    BindResult,
    BridgeClient,
    BroadcastOptions,
    Broadcaster,
    KeyManager,
    TransferInResult,
    TransferOutResult,
    TransferOutTimeoutResult,
    TxCommitResult,
    UpdateBindResult,
)
from .codec import decode, decode_envelope, encode, encode_envelope
from .config import BridgeConfig, Network
from .exceptions import (
    BridgeError,
    BroadcastError,
    DecodeError,
    SignBytesError,
    ValidationError,
)
from .models import (
    ADDR_LEN,
    ETH_ADDR_LEN,
    ROUTE_BRIDGE,
    AccAddress,
    BindStatus,
    BridgeMsg,
    Coin,
    EthereumAddress,
)
from .msg import (
    BIND_MSG_TYPE,
    MAX_DECIMAL,
    TRANSFER_IN_MSG_TYPE,
    TRANSFER_OUT_MSG_TYPE,
    TRANSFER_OUT_TIMEOUT_MSG_TYPE,
    UPDATE_BIND_MSG_TYPE,
    BindMsg,
    Msg,
    TransferInMsg,
    TransferOutMsg,
    TransferOutTimeoutMsg,
    UpdateBindMsg,
)
from .registry import MSG_REGISTRY, lookup_msg_class, register_msg

getLogger(__name__).addHandler(NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Value types
    "AccAddress",
    "EthereumAddress",
    "Coin",
    "BindStatus",
    "ADDR_LEN",
    "ETH_ADDR_LEN",
    # Messages
    "BridgeMsg",
    "Msg",
    "TransferInMsg",
    "TransferOutMsg",
    "TransferOutTimeoutMsg",
    "BindMsg",
    "UpdateBindMsg",
    "ROUTE_BRIDGE",
    "TRANSFER_IN_MSG_TYPE",
    "TRANSFER_OUT_MSG_TYPE",
    "TRANSFER_OUT_TIMEOUT_MSG_TYPE",
    "BIND_MSG_TYPE",
    "UPDATE_BIND_MSG_TYPE",
    "MAX_DECIMAL",
    # Codec
    "encode",
    "encode_envelope",
    "decode",
    "decode_envelope",
    "MSG_REGISTRY",
    "register_msg",
    "lookup_msg_class",
    # Client
    "BridgeClient",
    "Broadcaster",
    "BroadcastOptions",
    "KeyManager",
    "TxCommitResult",
    "TransferInResult",
    "TransferOutResult",
    "TransferOutTimeoutResult",
    "BindResult",
    "UpdateBindResult",
    # Configuration
    "BridgeConfig",
    "Network",
    # Exceptions
    "BridgeError",
    "DecodeError",
    "ValidationError",
    "BroadcastError",
    "SignBytesError",
    # Version
    "__version__",
]
