"""Address value types for both sides of the bridge.

EthereumAddress is a fixed 20-byte external-chain address rendered as
``0x``-prefixed lowercase hex. AccAddress is the native-chain account address:
an opaque byte string whose human and JSON form is bech32 with the network
prefix. Its length is checked by message validation, not at construction.

Both types subclass ``bytes`` so equality, hashing and ``len()`` behave like
the raw address, and both plug into pydantic through
``__get_pydantic_core_schema__`` so they can be used directly as message
fields.
"""

from __future__ import annotations

import json
import re
from typing import Any

from bech32 import bech32_decode, bech32_encode, convertbits
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ..config import DEFAULT_NETWORK, Network
from ..exceptions import DecodeError

ETH_ADDR_LEN = 20
ADDR_LEN = 20

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def _network_from_context(info: core_schema.SerializationInfo) -> Network:
    context = info.context or {}
    return Network(context.get("network", DEFAULT_NETWORK))


class EthereumAddress(bytes):
    """A 20-byte external-chain (EVM) address.

    Example:
        >>> addr = EthereumAddress.from_hex("0x00000000000000000000000000000000000000A1")
        >>> str(addr)
        '0x00000000000000000000000000000000000000a1'
        >>> addr.is_empty()
        False
        >>> EthereumAddress().is_empty()
        True
    """

    def __new__(cls, value: bytes = bytes(ETH_ADDR_LEN)) -> EthereumAddress:
        if len(value) != ETH_ADDR_LEN:
            raise DecodeError(
                f"ethereum address must be {ETH_ADDR_LEN} bytes, got {len(value)}"
            )
        return super().__new__(cls, value)

    @classmethod
    def from_hex(cls, text: str) -> EthereumAddress:
        """Decode a hex address; the ``0x`` prefix is optional.

        Raises:
            DecodeError: If the payload is not exactly 40 hex digits
        """
        payload = text[2:] if text[:2] in ("0x", "0X") else text
        if not _HEX_RE.fullmatch(payload):
            raise DecodeError(f"invalid hex in ethereum address {text!r}")
        if len(payload) != ETH_ADDR_LEN * 2:
            raise DecodeError(
                f"ethereum address must be {ETH_ADDR_LEN * 2} hex digits, "
                f"got {len(payload)} in {text!r}"
            )
        return cls(bytes.fromhex(payload))

    @classmethod
    def from_json(cls, data: str | bytes) -> EthereumAddress:
        """Decode from a JSON string literal such as ``"0x..."``.

        Raises:
            DecodeError: If the input is not a JSON string holding a
                ``0x``-prefixed 40-digit hex address
        """
        try:
            value = json.loads(data)
        except ValueError as e:
            raise DecodeError(f"ethereum address is not valid JSON: {e}") from e
        return cls._from_json_value(value)

    @classmethod
    def _from_json_value(cls, value: Any) -> EthereumAddress:
        if not isinstance(value, str):
            raise DecodeError(
                f"ethereum address must be a JSON string, got {type(value).__name__}"
            )
        if value[:2] not in ("0x", "0X"):
            raise DecodeError(f"ethereum address {value!r} is missing the 0x prefix")
        return cls.from_hex(value)

    def to_json(self) -> str:
        """Encode as a JSON string literal."""
        return json.dumps(str(self))

    def is_empty(self) -> bool:
        """True when the address is all zero."""
        return int.from_bytes(self, "big") == 0

    def __str__(self) -> str:
        return "0x" + self.hex()

    def __repr__(self) -> str:
        return f"EthereumAddress('{self}')"

    @classmethod
    def _validate(cls, value: Any) -> EthereumAddress:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls._from_json_value(value)
        if isinstance(value, (bytes, bytearray)):
            return cls(bytes(value))
        raise DecodeError(f"cannot build an ethereum address from {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )


class AccAddress(bytes):
    """A native-chain account address.

    The protocol length is ``ADDR_LEN``; other lengths can be held so that
    message validation can reject them with a proper reason.

    Example:
        >>> addr = AccAddress(bytes(range(20)))
        >>> AccAddress.from_bech32(addr.to_bech32("tbnb")) == addr
        True
    """

    def __new__(cls, value: bytes = b"") -> AccAddress:
        return super().__new__(cls, value)

    @classmethod
    def from_bech32(cls, text: str) -> AccAddress:
        """Decode a bech32 address with any prefix. The empty string is the empty address.

        Raises:
            DecodeError: If the string is not valid bech32
        """
        if text == "":
            return cls()
        hrp, data = bech32_decode(text)
        if hrp is None or data is None:
            raise DecodeError(f"invalid bech32 address {text!r}")
        raw = convertbits(data, 5, 8, False)
        if raw is None:
            raise DecodeError(f"invalid bech32 payload in {text!r}")
        return cls(bytes(raw))

    @classmethod
    def from_json(cls, data: str | bytes) -> AccAddress:
        """Decode from a JSON string literal holding a bech32 address."""
        try:
            value = json.loads(data)
        except ValueError as e:
            raise DecodeError(f"native address is not valid JSON: {e}") from e
        if not isinstance(value, str):
            raise DecodeError(
                f"native address must be a JSON string, got {type(value).__name__}"
            )
        return cls.from_bech32(value)

    def to_bech32(self, hrp: str) -> str:
        """Render as bech32 with the given human-readable prefix."""
        if len(self) == 0:
            return ""
        data = convertbits(self, 8, 5)
        if data is None:
            raise ValueError(f"cannot convert {self.hex()} to bech32")
        return bech32_encode(hrp, data)

    def to_json(self, network: Network = DEFAULT_NETWORK) -> str:
        """Return the JSON string literal of the bech32 form for ``network``."""
        return json.dumps(self.to_bech32(network.hrp))

    def __str__(self) -> str:
        return self.to_bech32(DEFAULT_NETWORK.hrp)

    def __repr__(self) -> str:
        return f"AccAddress('{self.hex()}')"

    @classmethod
    def _validate(cls, value: Any) -> AccAddress:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_bech32(value)
        if isinstance(value, (bytes, bytearray)):
            return cls(bytes(value))
        raise DecodeError(f"cannot build a native address from {type(value).__name__}")

    @classmethod
    def _serialize(cls, value: AccAddress, info: core_schema.SerializationInfo) -> str:
        return value.to_bech32(_network_from_context(info).hrp)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=True, when_used="json"
            ),
        )
