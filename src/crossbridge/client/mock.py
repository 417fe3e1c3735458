"""In-memory broadcaster for tests and dry runs.

MockBroadcaster records every message it is handed and answers with a
deterministic commit result whose hash is derived from the message sign
bytes. Failures and rejections can be simulated through MockBroadcastConfig.
"""

from __future__ import annotations

import hashlib
import random
from dataclasses import dataclass
from logging import getLogger

from ..config import DEFAULT_NETWORK, Network
from ..exceptions import BroadcastError
from ..models.base import BridgeMsg
from .broadcaster import BroadcastOptions, Broadcaster, TxCommitResult
from .config import MockBroadcastConfig

log = getLogger(__name__)


@dataclass(frozen=True)
class SentMsg:
    """One recorded broadcast call."""

    msg: BridgeMsg
    sync: bool
    options: BroadcastOptions | None


class MockBroadcaster(Broadcaster):
    """Broadcaster that never leaves the process.

    Attributes:
        config: Mock behaviour (failure rate, result code)
        network: Network used to render sign bytes for the result hash
        sent: Every successful broadcast call, in order

    Examples:
        ```python
        from crossbridge import BridgeClient
        from crossbridge.client import MockBroadcaster, StaticKeyManager

        broadcaster = MockBroadcaster()
        client = BridgeClient(broadcaster, StaticKeyManager(my_addr))
        result = client.transfer_out(to=eth_addr, amount=coin, expire_time=1700000000)

        assert result.ok
        assert broadcaster.sent[0].msg.to == eth_addr
        ```
    """

    def __init__(
        self, config: MockBroadcastConfig | None = None, network: Network = DEFAULT_NETWORK
    ) -> None:
        """Initialize mock broadcaster.

        Args:
            config: Mock configuration. If None, uses default config.
            network: Network whose prefix is used when hashing sign bytes
        """
        self.config = config if config is not None else MockBroadcastConfig()
        self.network = network
        self.sent: list[SentMsg] = []
        self._rng = random.Random(self.config.seed)

    def broadcast(
        self, msg: BridgeMsg, sync: bool, options: BroadcastOptions | None = None
    ) -> TxCommitResult:
        if self.config.failure_rate > 0 and self._rng.random() < self.config.failure_rate:
            log.info("Simulated broadcast failure for %s", msg.msg_type)
            raise BroadcastError(f"simulated broadcast failure for {msg.msg_type}")

        tx_hash = hashlib.sha256(msg.sign_bytes(self.network)).hexdigest().upper()
        self.sent.append(SentMsg(msg=msg, sync=sync, options=options))

        code = self.config.response_code
        log.debug(
            "Broadcast %s (sync=%s) hash=%s code=%d", msg.msg_type, sync, tx_hash, code
        )

        return TxCommitResult(
            ok=code == 0,
            log=self.config.log,
            hash=tx_hash,
            code=code,
            data=msg.msg_type if sync else "",
        )

    def reset(self) -> None:
        """Forget recorded broadcasts."""
        self.sent.clear()
