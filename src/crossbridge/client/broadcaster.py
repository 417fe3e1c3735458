"""Abstract interface for transaction broadcasters.

A broadcaster takes a validated bridge message, wraps it in a signed
transaction and submits it to the native chain. crossbridge never talks to a
network itself; applications plug in a broadcaster for their node or RPC
endpoint, and tests use MockBroadcaster.

Design Pattern: Strategy Pattern / Adapter Pattern
- Broadcaster: Abstract interface
- MockBroadcaster: In-memory implementation for tests and dry runs
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import TypeVar

from ..models.base import BridgeMsg

MAX_MEMO_LENGTH = 128

R = TypeVar("R", bound="TxCommitResult")


@dataclass(frozen=True)
class TxCommitResult:
    """Outcome of committing a transaction.

    Attributes:
        ok: True when the chain accepted the transaction
        log: Log text returned by the chain
        hash: Transaction hash (upper-case hex)
        code: Result code, 0 on success
        data: Result data returned by the chain (empty for async broadcasts)
    """

    ok: bool
    log: str
    hash: str
    code: int
    data: str

    @classmethod
    def from_commit(cls: type[R], commit: TxCommitResult) -> R:
        """Re-wrap a commit result as ``cls`` (a kind-specific result)."""
        return cls(**{f.name: getattr(commit, f.name) for f in fields(TxCommitResult)})


@dataclass(frozen=True)
class BroadcastOptions:
    """Per-transaction options handed through to the broadcaster.

    Attributes:
        memo: Free-form transaction memo (at most 128 characters)
        source: Source identifier of the submitting application (>= 0)
    """

    memo: str = ""
    source: int = 0

    def __post_init__(self) -> None:
        """Validate option values."""
        if len(self.memo) > MAX_MEMO_LENGTH:
            raise ValueError(f"memo must be at most {MAX_MEMO_LENGTH} characters, got {len(self.memo)}")

        if self.source < 0:
            raise ValueError(f"source must be >= 0, got {self.source}")


class Broadcaster(ABC):
    """Abstract interface for submitting bridge messages.

    Examples:
        ```python
        class RpcBroadcaster(Broadcaster):
            def __init__(self, rpc, key_manager):
                self.rpc = rpc
                self.key_manager = key_manager

            def broadcast(self, msg, sync, options=None):
                tx = self.key_manager.sign(msg.sign_bytes(), options)
                return self.rpc.broadcast_tx(tx, sync=sync)
        ```
    """

    @abstractmethod
    def broadcast(
        self, msg: BridgeMsg, sync: bool, options: BroadcastOptions | None = None
    ) -> TxCommitResult:
        """Sign and submit ``msg``.

        Args:
            msg: Validated bridge message
            sync: If True wait for the commit result, otherwise return as soon
                as the transaction is accepted for processing
            options: Optional per-transaction options

        Returns:
            Commit result from the chain

        Raises:
            BroadcastError: If submission fails
        """
        pass
