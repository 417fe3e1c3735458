"""Asset-registration messages: bind an external contract to a native symbol.

A bind request is made by the token owner with BindMsg; a validator later
reports the outcome with UpdateBindMsg.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from ..exceptions import ValidationError
from ..models.address import AccAddress, EthereumAddress
from ..models.base import BridgeMsg, check_addr_len, check_not_empty
from ..models.fields import Int8, Int64
from ..models.status import BindStatus

BIND_MSG_TYPE = "crossBind"
UPDATE_BIND_MSG_TYPE = "crossUpdateBind"

# Not enforced by validate_basic; the ledger decides what it accepts.
MAX_DECIMAL = 18


def _check_symbol(symbol: str) -> None:
    if len(symbol) == 0:
        raise ValidationError("symbol should not be empty")


def _check_bind_amount(amount: int) -> None:
    if amount <= 0:
        raise ValidationError("amount should be larger than 0")


def _check_decimals(decimals: int) -> None:
    if decimals < 0:
        raise ValidationError("decimal should be no less than 0")


class BindMsg(BridgeMsg):
    """Request to bind ``contract_address`` on the external chain to ``symbol``."""

    from_address: AccAddress = Field(alias="from")
    symbol: str
    amount: int = Int64()
    contract_address: EthereumAddress
    contract_decimals: int = Int8()
    expire_time: int = Int64()

    msg_type: ClassVar[str] = BIND_MSG_TYPE
    signer_field: ClassVar[str] = "from_address"

    def __str__(self) -> str:
        return (
            f"Bind{{{self.from_address}#{self.symbol}#{self.amount}#{self.contract_address}"
            f"#{self.contract_decimals}#{self.expire_time}}}"
        )

    def validate_basic(self) -> None:
        check_addr_len(self.from_address, "from address")
        _check_symbol(self.symbol)
        _check_bind_amount(self.amount)
        check_not_empty(self.contract_address, "contract address")
        _check_decimals(self.contract_decimals)
        if self.expire_time <= 0:
            raise ValidationError("expire time should be larger than 0")


class UpdateBindMsg(BridgeMsg):
    """Validator report of how a bind request ended."""

    sequence: int = Int64()
    status: BindStatus
    symbol: str
    amount: int = Int64()
    contract_address: EthereumAddress
    contract_decimals: int = Int8()
    validator_address: AccAddress

    msg_type: ClassVar[str] = UPDATE_BIND_MSG_TYPE
    signer_field: ClassVar[str] = "validator_address"

    def __str__(self) -> str:
        return (
            f"UpdateBind{{{self.validator_address}#{self.symbol}#{self.amount}"
            f"#{self.contract_address}#{self.contract_decimals}#{self.status.name}}}"
        )

    def validate_basic(self) -> None:
        check_addr_len(self.validator_address, "validator address")
        _check_symbol(self.symbol)
        _check_bind_amount(self.amount)
        check_not_empty(self.contract_address, "contract address")
        _check_decimals(self.contract_decimals)
