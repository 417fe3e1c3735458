"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from crossbridge import (
    AccAddress,
    BindMsg,
    BindStatus,
    Coin,
    EthereumAddress,
    TransferInMsg,
    TransferOutMsg,
    TransferOutTimeoutMsg,
    UpdateBindMsg,
)


@pytest.fixture
def validator_addr() -> AccAddress:
    """Native address of the relaying validator."""
    return AccAddress(bytes(range(1, 21)))


@pytest.fixture
def user_addr() -> AccAddress:
    """Native address of an end user."""
    return AccAddress(bytes([0xAB] * 20))


@pytest.fixture
def contract_addr() -> EthereumAddress:
    """Token contract on the external chain."""
    return EthereumAddress.from_hex("0x0000000000000000000000000000000000000001")


@pytest.fixture
def eth_addr() -> EthereumAddress:
    """External-chain user address."""
    return EthereumAddress.from_hex("0x5b38da6a701c568545dcfcb03fcb875f56beddc4")


@pytest.fixture
def bnb() -> Coin:
    return Coin(denom="BNB", amount=100000000)


@pytest.fixture
def relay_fee() -> Coin:
    return Coin(denom="BNB", amount=1000)


@pytest.fixture
def transfer_in_msg(
    validator_addr: AccAddress,
    user_addr: AccAddress,
    contract_addr: EthereumAddress,
    eth_addr: EthereumAddress,
    bnb: Coin,
    relay_fee: Coin,
) -> TransferInMsg:
    return TransferInMsg(
        sequence=7,
        contract_address=contract_addr,
        sender_address=eth_addr,
        receiver_address=user_addr,
        amount=bnb,
        relay_fee=relay_fee,
        validator_address=validator_addr,
        expire_time=1700000000,
    )


@pytest.fixture
def transfer_out_msg(user_addr: AccAddress, eth_addr: EthereumAddress, bnb: Coin) -> TransferOutMsg:
    return TransferOutMsg(from_address=user_addr, to=eth_addr, amount=bnb, expire_time=100)


@pytest.fixture
def transfer_out_timeout_msg(
    user_addr: AccAddress, validator_addr: AccAddress, bnb: Coin
) -> TransferOutTimeoutMsg:
    return TransferOutTimeoutMsg(
        sender_address=user_addr,
        sequence=3,
        amount=bnb,
        validator_address=validator_addr,
    )


@pytest.fixture
def bind_msg(user_addr: AccAddress, contract_addr: EthereumAddress) -> BindMsg:
    return BindMsg(
        from_address=user_addr,
        symbol="ETH.USDT",
        amount=100,
        contract_address=contract_addr,
        contract_decimals=18,
        expire_time=9999999999,
    )


@pytest.fixture
def update_bind_msg(validator_addr: AccAddress, contract_addr: EthereumAddress) -> UpdateBindMsg:
    return UpdateBindMsg(
        sequence=11,
        validator_address=validator_addr,
        symbol="ETH.USDT",
        amount=100,
        contract_address=contract_addr,
        contract_decimals=18,
        status=BindStatus.SUCCESS,
    )
