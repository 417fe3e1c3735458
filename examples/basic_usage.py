"""Basic usage example for crossbridge.

Builds each bridge message kind through BridgeClient against the in-memory
MockBroadcaster and prints the resulting sign bytes.
"""

from __future__ import annotations

import logging

from crossbridge import (
    AccAddress,
    BindStatus,
    BridgeConfig,
    Coin,
    EthereumAddress,
    Network,
    ValidationError,
    decode_envelope,
    encode_envelope,
)
from crossbridge.client import BridgeClient, MockBroadcaster, StaticKeyManager


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("crossbridge Basic Usage Example")
    print("=" * 60)

    owner = AccAddress(bytes([0x11] * 20))
    validator = AccAddress(bytes([0x22] * 20))
    usdt_contract = EthereumAddress.from_hex("0xdac17f958d2ee523a2206206994597c13d831ec7")
    eth_user = EthereumAddress.from_hex("0x5b38da6a701c568545dcfcb03fcb875f56beddc4")

    config = BridgeConfig(network=Network.TESTNET)
    broadcaster = MockBroadcaster(network=config.network)
    owner_client = BridgeClient(broadcaster, StaticKeyManager(owner), config)
    validator_client = BridgeClient(broadcaster, StaticKeyManager(validator), config)

    # 1. Bind an ERC-20 contract to a native token
    result = owner_client.bind(
        symbol="USDT-6D8",
        amount=1000000000000,
        contract_address=usdt_contract,
        contract_decimals=6,
        expire_time=1700000600,
    )
    print(f"\nBind:        ok={result.ok} hash={result.hash}")

    # 2. Validator confirms the bind
    result = validator_client.update_bind(
        sequence=0,
        symbol="USDT-6D8",
        amount=1000000000000,
        contract_address=usdt_contract,
        contract_decimals=6,
        status=BindStatus.SUCCESS,
    )
    print(f"UpdateBind:  ok={result.ok} hash={result.hash}")

    # 3. Owner sends tokens to the external chain
    result = owner_client.transfer_out(
        to=eth_user,
        amount=Coin(denom="USDT-6D8", amount=5000000000),
        expire_time=1700000600,
    )
    print(f"TransferOut: ok={result.ok} hash={result.hash}")

    # 4. Invalid messages never reach the broadcaster
    try:
        owner_client.transfer_out(
            to=EthereumAddress(),
            amount=Coin(denom="USDT-6D8", amount=1),
            expire_time=1700000600,
        )
    except ValidationError as e:
        print(f"\nRejected before broadcast: {e.reason}")

    # 5. Inspect what was signed
    print("\nSign bytes:")
    for sent in broadcaster.sent:
        print(f"  {sent.msg.msg_type}: {sent.msg.sign_bytes(config.network).decode()}")

    # 6. Envelopes carry the type tag across process boundaries
    envelope = encode_envelope(broadcaster.sent[0].msg, config.network)
    print(f"\nEnvelope: {envelope.decode()}")
    print(f"Decoded:  {decode_envelope(envelope)}")


if __name__ == "__main__":
    main()
