"""Bridge client: one operation per bridge message kind.

Each operation resolves the signer address from the key manager, builds the
message, validates it and hands it to the broadcaster. A ValidationError stops
the operation before the broadcaster is called. Broadcaster errors propagate
unchanged; there are no retries here.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TypeVar

from ..config import BridgeConfig
from ..exceptions import ValidationError
from ..models.address import AccAddress, EthereumAddress
from ..models.base import BridgeMsg
from ..models.coin import Coin
from ..models.status import BindStatus
from ..msg import BindMsg, TransferInMsg, TransferOutMsg, TransferOutTimeoutMsg, UpdateBindMsg
from .broadcaster import BroadcastOptions, Broadcaster, TxCommitResult
from .keys import KeyManager

log = getLogger(__name__)

R = TypeVar("R", bound=TxCommitResult)


@dataclass(frozen=True)
class TransferInResult(TxCommitResult):
    pass


@dataclass(frozen=True)
class TransferOutResult(TxCommitResult):
    pass


@dataclass(frozen=True)
class TransferOutTimeoutResult(TxCommitResult):
    pass


@dataclass(frozen=True)
class BindResult(TxCommitResult):
    pass


@dataclass(frozen=True)
class UpdateBindResult(TxCommitResult):
    pass


class BridgeClient:
    """Builds, validates and broadcasts bridge messages.

    Attributes:
        broadcaster: Collaborator that signs and submits messages
        key_manager: Collaborator that supplies the signer address
        config: Client configuration (default broadcast mode)

    Examples:
        ```python
        from crossbridge import BridgeClient, Coin, EthereumAddress
        from crossbridge.client import MockBroadcaster, StaticKeyManager

        client = BridgeClient(MockBroadcaster(), StaticKeyManager(my_addr))

        result = client.bind(
            symbol="ETH.USDT",
            amount=100,
            contract_address=EthereumAddress.from_hex("0x" + "00" * 19 + "01"),
            contract_decimals=18,
            expire_time=9999999999,
        )
        print(result.hash)
        ```
    """

    def __init__(
        self,
        broadcaster: Broadcaster,
        key_manager: KeyManager,
        config: BridgeConfig | None = None,
    ) -> None:
        self.broadcaster = broadcaster
        self.key_manager = key_manager
        self.config = config if config is not None else BridgeConfig()

    def transfer_in(
        self,
        sequence: int,
        contract_address: EthereumAddress,
        sender_address: EthereumAddress,
        receiver_address: AccAddress,
        amount: Coin,
        relay_fee: Coin,
        expire_time: int,
        sync: bool | None = None,
        options: BroadcastOptions | None = None,
    ) -> TransferInResult:
        """Credit ``receiver_address`` with assets locked on the external chain.

        The caller signs as the relaying validator.
        """
        msg = TransferInMsg(
            sequence=sequence,
            contract_address=contract_address,
            sender_address=sender_address,
            receiver_address=receiver_address,
            amount=amount,
            relay_fee=relay_fee,
            validator_address=self.key_manager.current_address(),
            expire_time=expire_time,
        )
        return self._broadcast_msg(msg, TransferInResult, sync, options)

    def transfer_out(
        self,
        to: EthereumAddress,
        amount: Coin,
        expire_time: int,
        sync: bool | None = None,
        options: BroadcastOptions | None = None,
    ) -> TransferOutResult:
        """Send ``amount`` from the caller's account to ``to`` on the external chain."""
        msg = TransferOutMsg(
            from_address=self.key_manager.current_address(),
            to=to,
            amount=amount,
            expire_time=expire_time,
        )
        return self._broadcast_msg(msg, TransferOutResult, sync, options)

    def transfer_out_timeout(
        self,
        sender: AccAddress,
        sequence: int,
        amount: Coin,
        sync: bool | None = None,
        options: BroadcastOptions | None = None,
    ) -> TransferOutTimeoutResult:
        """Report that outbound transfer ``sequence`` from ``sender`` timed out."""
        msg = TransferOutTimeoutMsg(
            sender_address=sender,
            sequence=sequence,
            amount=amount,
            validator_address=self.key_manager.current_address(),
        )
        return self._broadcast_msg(msg, TransferOutTimeoutResult, sync, options)

    def bind(
        self,
        symbol: str,
        amount: int,
        contract_address: EthereumAddress,
        contract_decimals: int,
        expire_time: int,
        sync: bool | None = None,
        options: BroadcastOptions | None = None,
    ) -> BindResult:
        """Request binding of ``contract_address`` to the native token ``symbol``."""
        msg = BindMsg(
            from_address=self.key_manager.current_address(),
            symbol=symbol,
            amount=amount,
            contract_address=contract_address,
            contract_decimals=contract_decimals,
            expire_time=expire_time,
        )
        return self._broadcast_msg(msg, BindResult, sync, options)

    def update_bind(
        self,
        sequence: int,
        symbol: str,
        amount: int,
        contract_address: EthereumAddress,
        contract_decimals: int,
        status: BindStatus,
        sync: bool | None = None,
        options: BroadcastOptions | None = None,
    ) -> UpdateBindResult:
        """Report the outcome of bind request ``sequence``."""
        msg = UpdateBindMsg(
            sequence=sequence,
            validator_address=self.key_manager.current_address(),
            symbol=symbol,
            amount=amount,
            contract_address=contract_address,
            contract_decimals=contract_decimals,
            status=status,
        )
        return self._broadcast_msg(msg, UpdateBindResult, sync, options)

    def _broadcast_msg(
        self,
        msg: BridgeMsg,
        result_class: type[R],
        sync: bool | None,
        options: BroadcastOptions | None,
    ) -> R:
        log.debug("Built %s", msg)
        try:
            msg.validate_basic()
        except ValidationError as e:
            log.warning("Rejected %s before broadcast: %s", msg.msg_type, e.reason)
            raise

        if sync is None:
            sync = self.config.sync

        commit = self.broadcaster.broadcast(msg, sync, options)
        return result_class.from_commit(commit)
