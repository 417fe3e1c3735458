"""Asset-movement messages: inbound transfer, outbound transfer and its timeout.

The three messages are correlated by ``sequence``, which is assigned and
ordered by the ledger, not here.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from ..exceptions import ValidationError
from ..models.address import AccAddress, EthereumAddress
from ..models.base import BridgeMsg, check_addr_len, check_not_empty, check_positive_coin
from ..models.coin import Coin
from ..models.fields import Int64

TRANSFER_IN_MSG_TYPE = "crossTransferIn"
TRANSFER_OUT_MSG_TYPE = "crossTransferOut"
TRANSFER_OUT_TIMEOUT_MSG_TYPE = "crossTransferOutTimeout"


class TransferInMsg(BridgeMsg):
    """Credit a native account with assets locked on the external chain.

    Submitted by a validator after it observes the lock on the external chain.
    """

    sequence: int = Int64()
    contract_address: EthereumAddress
    sender_address: EthereumAddress
    receiver_address: AccAddress
    amount: Coin
    relay_fee: Coin
    validator_address: AccAddress
    expire_time: int = Int64()

    msg_type: ClassVar[str] = TRANSFER_IN_MSG_TYPE
    signer_field: ClassVar[str] = "validator_address"

    def __str__(self) -> str:
        return (
            f"TransferIn{{{self.sequence}#{self.contract_address}#{self.sender_address}"
            f"#{self.receiver_address}#{self.amount}#{self.relay_fee}"
            f"#{self.validator_address}#{self.expire_time}}}"
        )

    def validate_basic(self) -> None:
        if self.sequence < 0:
            raise ValidationError("sequence should not be less than 0")
        if self.expire_time <= 0:
            raise ValidationError("expire time should be larger than 0")
        check_not_empty(self.contract_address, "contract address")
        check_not_empty(self.sender_address, "sender address")
        check_addr_len(self.receiver_address, "receiver address")
        check_addr_len(self.validator_address, "validator address")
        check_positive_coin(self.amount, "amount to send")
        check_positive_coin(self.relay_fee, "relay fee")


class TransferOutMsg(BridgeMsg):
    """Send native assets to an address on the external chain."""

    from_address: AccAddress = Field(alias="from")
    to: EthereumAddress
    amount: Coin
    expire_time: int = Int64()

    msg_type: ClassVar[str] = TRANSFER_OUT_MSG_TYPE
    signer_field: ClassVar[str] = "from_address"

    def __str__(self) -> str:
        return f"TransferOut{{{self.from_address}#{self.to}#{self.amount}#{self.expire_time}}}"

    def validate_basic(self) -> None:
        check_addr_len(self.from_address, "from address")
        check_not_empty(self.to, "to address")
        check_positive_coin(self.amount, "amount")
        if self.expire_time <= 0:
            raise ValidationError("expire time should be larger than 0")


class TransferOutTimeoutMsg(BridgeMsg):
    """Report that an outbound transfer expired so the sender can be refunded."""

    sender_address: AccAddress
    sequence: int = Int64()
    amount: Coin
    validator_address: AccAddress

    msg_type: ClassVar[str] = TRANSFER_OUT_TIMEOUT_MSG_TYPE
    signer_field: ClassVar[str] = "validator_address"

    def __str__(self) -> str:
        return (
            f"TransferOutTimeout{{{self.sender_address}#{self.sequence}"
            f"#{self.amount}#{self.validator_address}}}"
        )

    def validate_basic(self) -> None:
        check_addr_len(self.sender_address, "sender address")
        if self.sequence < 0:
            raise ValidationError("sequence should not be less than 0")
        check_addr_len(self.validator_address, "validator address")
        check_positive_coin(self.amount, "amount to send")
