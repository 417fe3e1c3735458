"""Bridge message definitions.

Five message kinds make up the bridge protocol. Importing this package
registers all of them for envelope decoding.
"""

from __future__ import annotations

from typing import Union

from ..models.base import BridgeMsg
from ..registry import register_msg
from .bind import BIND_MSG_TYPE, MAX_DECIMAL, UPDATE_BIND_MSG_TYPE, BindMsg, UpdateBindMsg
from .transfer import (
    TRANSFER_IN_MSG_TYPE,
    TRANSFER_OUT_MSG_TYPE,
    TRANSFER_OUT_TIMEOUT_MSG_TYPE,
    TransferInMsg,
    TransferOutMsg,
    TransferOutTimeoutMsg,
)

Msg = Union[TransferInMsg, TransferOutMsg, TransferOutTimeoutMsg, BindMsg, UpdateBindMsg]

ALL_MSGS: tuple[type[BridgeMsg], ...] = (
    TransferInMsg,
    TransferOutTimeoutMsg,
    BindMsg,
    TransferOutMsg,
    UpdateBindMsg,
)

for _msg_class in ALL_MSGS:
    register_msg(_msg_class)

__all__ = [
    "Msg",
    "ALL_MSGS",
    "TransferInMsg",
    "TransferOutMsg",
    "TransferOutTimeoutMsg",
    "BindMsg",
    "UpdateBindMsg",
    "TRANSFER_IN_MSG_TYPE",
    "TRANSFER_OUT_MSG_TYPE",
    "TRANSFER_OUT_TIMEOUT_MSG_TYPE",
    "BIND_MSG_TYPE",
    "UPDATE_BIND_MSG_TYPE",
    "MAX_DECIMAL",
]
