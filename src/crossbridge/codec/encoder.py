"""Sign-byte and envelope encoder for bridge messages.

Sign bytes are compact JSON of the message fields in declaration order with
their wire names. Declaration order is fixed per class, so the output does not
depend on the keyword order used to build the message.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic_core import PydanticSerializationError

from ..config import DEFAULT_NETWORK, Network
from ..exceptions import SignBytesError

if TYPE_CHECKING:
    from ..models.base import BridgeMsg

# The chain's JSON encoder writes these as \uXXXX escapes inside strings.
_HTML_UNSAFE = ("<", ">", "&", "\u2028", "\u2029")


def _escape_html(text: str) -> str:
    for char in _HTML_UNSAFE:
        text = text.replace(char, "\\u%04x" % ord(char))
    return text


def encode(msg: BridgeMsg, network: Network = DEFAULT_NETWORK) -> bytes:
    """Encode a message to the canonical bytes its signer signs over.

    Args:
        msg: Bridge message instance
        network: Network whose bech32 prefix renders native addresses

    Returns:
        UTF-8 encoded compact JSON

    Raises:
        SignBytesError: If the message cannot be serialized

    Examples:
        ```python
        from crossbridge import BindMsg, EthereumAddress, encode

        msg = BindMsg(
            from_address=addr,
            symbol="ETH.USDT",
            amount=100,
            contract_address=EthereumAddress.from_hex("0x" + "00" * 19 + "01"),
            contract_decimals=18,
            expire_time=9999999999,
        )
        data = encode(msg)
        # b'{"from":"bnb1...","symbol":"ETH.USDT","amount":100,...}'
        ```
    """
    try:
        text = msg.model_dump_json(by_alias=True, context={"network": network})
    except PydanticSerializationError as e:
        raise SignBytesError(f"Cannot serialize {type(msg).__name__} for signing: {e}") from e

    return _escape_html(text).encode("utf-8")


def encode_envelope(msg: BridgeMsg, network: Network = DEFAULT_NETWORK) -> bytes:
    """Encode a message as a ``{"type": ..., "value": ...}`` JSON envelope.

    The envelope carries the type tag so ``decode_envelope()`` can pick the
    message class.

    Raises:
        SignBytesError: If the message cannot be serialized
    """
    try:
        value = msg.model_dump(mode="json", by_alias=True, context={"network": network})
    except PydanticSerializationError as e:
        raise SignBytesError(f"Cannot serialize {type(msg).__name__}: {e}") from e

    envelope = {"type": msg.msg_type, "value": value}
    return json.dumps(envelope, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
