"""Bridge client and its collaborators.

## Components

- **BridgeClient**: one operation per bridge message kind (transfer_in,
  transfer_out, transfer_out_timeout, bind, update_bind)
- **Broadcaster**: abstract collaborator that signs and submits a message
- **KeyManager**: abstract collaborator that supplies the signer address
- **MockBroadcaster** / **StaticKeyManager**: in-memory implementations for
  tests and dry runs

## Quick Start

```python
from crossbridge import AccAddress, Coin, EthereumAddress
from crossbridge.client import BridgeClient, MockBroadcaster, StaticKeyManager

client = BridgeClient(MockBroadcaster(), StaticKeyManager(AccAddress(my_key_bytes)))

result = client.transfer_out(
    to=EthereumAddress.from_hex("0x5b38da6a701c568545dcfcb03fcb875f56beddc4"),
    amount=Coin(denom="BNB", amount=100000000),
    expire_time=1700000000,
)
print(result.ok, result.hash)
```
"""

from __future__ import annotations

from .bridge import (
    BindResult,
    BridgeClient,
    TransferInResult,
    TransferOutResult,
    TransferOutTimeoutResult,
    UpdateBindResult,
)
from .broadcaster import BroadcastOptions, Broadcaster, TxCommitResult
from .config import MockBroadcastConfig
from .keys import KeyManager, StaticKeyManager
from .mock import MockBroadcaster, SentMsg

__all__ = [
    "BridgeClient",
    "Broadcaster",
    "BroadcastOptions",
    "TxCommitResult",
    "TransferInResult",
    "TransferOutResult",
    "TransferOutTimeoutResult",
    "BindResult",
    "UpdateBindResult",
    "KeyManager",
    "StaticKeyManager",
    "MockBroadcaster",
    "MockBroadcastConfig",
    "SentMsg",
]
