"""Tests for bridge message validation, signers and tags."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from crossbridge import (
    MAX_DECIMAL,
    ROUTE_BRIDGE,
    AccAddress,
    BindMsg,
    BindStatus,
    Coin,
    EthereumAddress,
    TransferInMsg,
    TransferOutMsg,
    TransferOutTimeoutMsg,
    UpdateBindMsg,
    ValidationError,
)


class TestTags:
    """Test route and type tags."""

    def test_route_is_bridge(self) -> None:
        for msg_class in (TransferInMsg, TransferOutMsg, TransferOutTimeoutMsg, BindMsg, UpdateBindMsg):
            assert msg_class.route == ROUTE_BRIDGE == "bridge"

    def test_type_tags(self) -> None:
        assert TransferInMsg.msg_type == "crossTransferIn"
        assert TransferOutTimeoutMsg.msg_type == "crossTransferOutTimeout"
        assert BindMsg.msg_type == "crossBind"
        assert TransferOutMsg.msg_type == "crossTransferOut"
        assert UpdateBindMsg.msg_type == "crossUpdateBind"


class TestSigners:
    """Test signer derivation."""

    def test_transfer_in_signed_by_validator(
        self, transfer_in_msg: TransferInMsg, validator_addr: AccAddress
    ) -> None:
        assert transfer_in_msg.signers() == [validator_addr]

    def test_transfer_out_signed_by_sender(
        self, transfer_out_msg: TransferOutMsg, user_addr: AccAddress
    ) -> None:
        assert transfer_out_msg.signers() == [user_addr]

    def test_timeout_signed_by_validator(
        self, transfer_out_timeout_msg: TransferOutTimeoutMsg, validator_addr: AccAddress
    ) -> None:
        assert transfer_out_timeout_msg.signers() == [validator_addr]

    def test_bind_signed_by_from(self, bind_msg: BindMsg, user_addr: AccAddress) -> None:
        assert bind_msg.signers() == [user_addr]

    def test_update_bind_signed_by_validator(
        self, update_bind_msg: UpdateBindMsg, validator_addr: AccAddress
    ) -> None:
        assert update_bind_msg.signers() == [validator_addr]

    def test_involved_addresses_equal_signers(
        self,
        transfer_in_msg: TransferInMsg,
        transfer_out_msg: TransferOutMsg,
        transfer_out_timeout_msg: TransferOutTimeoutMsg,
        bind_msg: BindMsg,
        update_bind_msg: UpdateBindMsg,
    ) -> None:
        for msg in (transfer_in_msg, transfer_out_msg, transfer_out_timeout_msg, bind_msg, update_bind_msg):
            assert msg.involved_addresses() == msg.signers()


class TestTransferInValidation:
    """Test TransferInMsg.validate_basic()."""

    def test_valid(self, transfer_in_msg: TransferInMsg) -> None:
        transfer_in_msg.validate_basic()

    def test_negative_sequence(self, transfer_in_msg: TransferInMsg) -> None:
        msg = transfer_in_msg.model_copy(update={"sequence": -1})
        with pytest.raises(ValidationError, match="sequence"):
            msg.validate_basic()

    def test_zero_sequence_is_valid(self, transfer_in_msg: TransferInMsg) -> None:
        transfer_in_msg.model_copy(update={"sequence": 0}).validate_basic()

    def test_first_failing_rule_wins(self, transfer_in_msg: TransferInMsg) -> None:
        """Test that sequence is reported before expire time."""
        msg = transfer_in_msg.model_copy(update={"sequence": -1, "expire_time": 0})
        with pytest.raises(ValidationError, match="sequence"):
            msg.validate_basic()

    @pytest.mark.parametrize("expire_time", [0, -5])
    def test_expire_time_must_be_positive(self, transfer_in_msg: TransferInMsg, expire_time: int) -> None:
        msg = transfer_in_msg.model_copy(update={"expire_time": expire_time})
        with pytest.raises(ValidationError, match="expire time should be larger than 0"):
            msg.validate_basic()

    def test_empty_contract(self, transfer_in_msg: TransferInMsg) -> None:
        msg = transfer_in_msg.model_copy(update={"contract_address": EthereumAddress()})
        with pytest.raises(ValidationError, match="contract address should not be empty"):
            msg.validate_basic()

    def test_empty_sender(self, transfer_in_msg: TransferInMsg) -> None:
        msg = transfer_in_msg.model_copy(update={"sender_address": EthereumAddress()})
        with pytest.raises(ValidationError, match="sender address should not be empty"):
            msg.validate_basic()

    @pytest.mark.parametrize("length", [0, 19, 21])
    def test_receiver_length(self, transfer_in_msg: TransferInMsg, length: int) -> None:
        msg = transfer_in_msg.model_copy(update={"receiver_address": AccAddress(bytes(length))})
        with pytest.raises(ValidationError, match="receiver address should be 20"):
            msg.validate_basic()

    @pytest.mark.parametrize("length", [0, 19, 21])
    def test_validator_length(self, transfer_in_msg: TransferInMsg, length: int) -> None:
        msg = transfer_in_msg.model_copy(update={"validator_address": AccAddress(bytes(length))})
        with pytest.raises(ValidationError, match="validator address should be 20"):
            msg.validate_basic()

    def test_amount_not_positive(self, transfer_in_msg: TransferInMsg) -> None:
        msg = transfer_in_msg.model_copy(update={"amount": Coin(denom="BNB", amount=0)})
        with pytest.raises(ValidationError, match="amount to send should be positive"):
            msg.validate_basic()

    def test_relay_fee_not_positive(self, transfer_in_msg: TransferInMsg) -> None:
        msg = transfer_in_msg.model_copy(update={"relay_fee": Coin(denom="BNB", amount=-1)})
        with pytest.raises(ValidationError, match="relay fee should be positive"):
            msg.validate_basic()


class TestTransferOutValidation:
    """Test TransferOutMsg.validate_basic()."""

    def test_valid(self, transfer_out_msg: TransferOutMsg) -> None:
        transfer_out_msg.validate_basic()

    def test_zero_to_address(self, transfer_out_msg: TransferOutMsg) -> None:
        msg = transfer_out_msg.model_copy(update={"to": EthereumAddress(bytes(20))})
        with pytest.raises(ValidationError) as exc_info:
            msg.validate_basic()

        assert exc_info.value.reason == "to address should not be empty"

    def test_from_length(self, transfer_out_msg: TransferOutMsg) -> None:
        msg = transfer_out_msg.model_copy(update={"from_address": AccAddress(bytes(10))})
        with pytest.raises(ValidationError, match="from address should be 20"):
            msg.validate_basic()

    def test_amount_not_positive(self, transfer_out_msg: TransferOutMsg) -> None:
        msg = transfer_out_msg.model_copy(update={"amount": Coin(denom="BNB", amount=0)})
        with pytest.raises(ValidationError, match="amount should be positive"):
            msg.validate_basic()

    def test_empty_denom_not_positive(self, transfer_out_msg: TransferOutMsg) -> None:
        msg = transfer_out_msg.model_copy(update={"amount": Coin(denom="", amount=10)})
        with pytest.raises(ValidationError, match="amount should be positive"):
            msg.validate_basic()

    def test_expire_time(self, transfer_out_msg: TransferOutMsg) -> None:
        msg = transfer_out_msg.model_copy(update={"expire_time": 0})
        with pytest.raises(ValidationError, match="expire time"):
            msg.validate_basic()


class TestTransferOutTimeoutValidation:
    """Test TransferOutTimeoutMsg.validate_basic()."""

    def test_valid(self, transfer_out_timeout_msg: TransferOutTimeoutMsg) -> None:
        transfer_out_timeout_msg.validate_basic()

    def test_negative_sequence(self, transfer_out_timeout_msg: TransferOutTimeoutMsg) -> None:
        msg = transfer_out_timeout_msg.model_copy(update={"sequence": -1})
        with pytest.raises(ValidationError, match="sequence should not be less than 0"):
            msg.validate_basic()

    def test_sender_length(self, transfer_out_timeout_msg: TransferOutTimeoutMsg) -> None:
        msg = transfer_out_timeout_msg.model_copy(update={"sender_address": AccAddress()})
        with pytest.raises(ValidationError, match="sender address should be 20"):
            msg.validate_basic()

    def test_validator_length(self, transfer_out_timeout_msg: TransferOutTimeoutMsg) -> None:
        msg = transfer_out_timeout_msg.model_copy(update={"validator_address": AccAddress(bytes(32))})
        with pytest.raises(ValidationError, match="validator address should be 20"):
            msg.validate_basic()

    def test_amount_not_positive(self, transfer_out_timeout_msg: TransferOutTimeoutMsg) -> None:
        msg = transfer_out_timeout_msg.model_copy(update={"amount": Coin(denom="BNB", amount=-100)})
        with pytest.raises(ValidationError, match="positive"):
            msg.validate_basic()


class TestBindValidation:
    """Test BindMsg.validate_basic()."""

    def test_valid(self, bind_msg: BindMsg, user_addr: AccAddress) -> None:
        """Test the documented bind scenario."""
        bind_msg.validate_basic()
        assert bind_msg.signers() == [user_addr]

    def test_empty_symbol(self, bind_msg: BindMsg) -> None:
        msg = bind_msg.model_copy(update={"symbol": ""})
        with pytest.raises(ValidationError, match="symbol should not be empty"):
            msg.validate_basic()

    @pytest.mark.parametrize("amount", [0, -1])
    def test_amount(self, bind_msg: BindMsg, amount: int) -> None:
        msg = bind_msg.model_copy(update={"amount": amount})
        with pytest.raises(ValidationError, match="amount should be larger than 0"):
            msg.validate_basic()

    def test_empty_contract(self, bind_msg: BindMsg) -> None:
        msg = bind_msg.model_copy(update={"contract_address": EthereumAddress()})
        with pytest.raises(ValidationError, match="contract address"):
            msg.validate_basic()

    def test_negative_decimals(self, bind_msg: BindMsg) -> None:
        msg = bind_msg.model_copy(update={"contract_decimals": -1})
        with pytest.raises(ValidationError, match="decimal should be no less than 0"):
            msg.validate_basic()

    def test_decimals_above_max_are_accepted(self, bind_msg: BindMsg) -> None:
        """Test that MAX_DECIMAL is not an upper bound in validate_basic."""
        bind_msg.model_copy(update={"contract_decimals": MAX_DECIMAL + 1}).validate_basic()

    def test_expire_time(self, bind_msg: BindMsg) -> None:
        msg = bind_msg.model_copy(update={"expire_time": -1})
        with pytest.raises(ValidationError, match="expire time"):
            msg.validate_basic()

    def test_from_length(self, bind_msg: BindMsg) -> None:
        msg = bind_msg.model_copy(update={"from_address": AccAddress(bytes(3))})
        with pytest.raises(ValidationError, match="from address"):
            msg.validate_basic()


class TestUpdateBindValidation:
    """Test UpdateBindMsg.validate_basic()."""

    def test_valid(self, update_bind_msg: UpdateBindMsg) -> None:
        update_bind_msg.validate_basic()

    def test_negative_decimals(self, update_bind_msg: UpdateBindMsg) -> None:
        msg = update_bind_msg.model_copy(update={"contract_decimals": -1})
        with pytest.raises(ValidationError, match="decimal"):
            msg.validate_basic()

    def test_amount(self, update_bind_msg: UpdateBindMsg) -> None:
        msg = update_bind_msg.model_copy(update={"amount": 0})
        with pytest.raises(ValidationError, match="amount should be larger than 0"):
            msg.validate_basic()

    def test_validator_length(self, update_bind_msg: UpdateBindMsg) -> None:
        msg = update_bind_msg.model_copy(update={"validator_address": AccAddress(bytes(19))})
        with pytest.raises(ValidationError, match="validator address"):
            msg.validate_basic()

    def test_empty_symbol(self, update_bind_msg: UpdateBindMsg) -> None:
        msg = update_bind_msg.model_copy(update={"symbol": ""})
        with pytest.raises(ValidationError, match="symbol"):
            msg.validate_basic()

    def test_every_status_is_valid(self, update_bind_msg: UpdateBindMsg) -> None:
        for status in BindStatus:
            update_bind_msg.model_copy(update={"status": status}).validate_basic()


class TestConstruction:
    """Test type-level constraints enforced at construction."""

    def test_messages_are_frozen(self, bind_msg: BindMsg) -> None:
        with pytest.raises(PydanticValidationError):
            bind_msg.symbol = "OTHER"  # type: ignore[misc]

    def test_int8_range(self, user_addr: AccAddress, contract_addr: EthereumAddress) -> None:
        """Test that contract_decimals must fit a signed byte."""
        with pytest.raises(PydanticValidationError):
            BindMsg(
                from_address=user_addr,
                symbol="ETH.USDT",
                amount=100,
                contract_address=contract_addr,
                contract_decimals=128,
                expire_time=1,
            )

    def test_int64_range(self, transfer_out_msg: TransferOutMsg) -> None:
        with pytest.raises(PydanticValidationError):
            TransferOutMsg(
                from_address=transfer_out_msg.from_address,
                to=transfer_out_msg.to,
                amount=transfer_out_msg.amount,
                expire_time=2**63,
            )

    def test_extra_fields_forbidden(self, user_addr: AccAddress, eth_addr: EthereumAddress, bnb: Coin) -> None:
        with pytest.raises(PydanticValidationError):
            TransferOutMsg(
                from_address=user_addr, to=eth_addr, amount=bnb, expire_time=1, memo="hi"
            )

    def test_wire_alias_accepted(self, user_addr: AccAddress, eth_addr: EthereumAddress, bnb: Coin) -> None:
        """Test that the wire name ``from`` populates from_address."""
        msg = TransferOutMsg.model_validate(
            {"from": user_addr, "to": eth_addr, "amount": bnb, "expire_time": 1}
        )
        assert msg.from_address == user_addr

    def test_hex_string_for_ethereum_field(self, user_addr: AccAddress, bnb: Coin) -> None:
        msg = TransferOutMsg(
            from_address=user_addr,
            to="0x5b38da6a701c568545dcfcb03fcb875f56beddc4",  # type: ignore[arg-type]
            amount=bnb,
            expire_time=1,
        )
        assert isinstance(msg.to, EthereumAddress)


class TestSummary:
    """Test human-readable summaries."""

    def test_transfer_out(self, transfer_out_msg: TransferOutMsg) -> None:
        text = str(transfer_out_msg)
        assert text.startswith("TransferOut{")
        assert "0x5b38da6a701c568545dcfcb03fcb875f56beddc4" in text
        assert "100000000BNB" in text

    def test_update_bind(self, update_bind_msg: UpdateBindMsg) -> None:
        text = str(update_bind_msg)
        assert text.startswith("UpdateBind{")
        assert "ETH.USDT" in text
        assert text.endswith("#SUCCESS}")

    def test_all_summaries_name_their_kind(
        self,
        transfer_in_msg: TransferInMsg,
        transfer_out_timeout_msg: TransferOutTimeoutMsg,
        bind_msg: BindMsg,
    ) -> None:
        assert str(transfer_in_msg).startswith("TransferIn{")
        assert str(transfer_out_timeout_msg).startswith("TransferOutTimeout{")
        assert str(bind_msg).startswith("Bind{")


class TestCoin:
    """Test the Coin value type."""

    def test_positive(self) -> None:
        assert Coin(denom="BNB", amount=1).is_positive()

    @pytest.mark.parametrize("denom,amount", [("BNB", 0), ("BNB", -1), ("", 5)])
    def test_not_positive(self, denom: str, amount: int) -> None:
        assert not Coin(denom=denom, amount=amount).is_positive()

    def test_str(self) -> None:
        assert str(Coin(denom="BNB", amount=42)) == "42BNB"
