"""Base class and shared contract for bridge messages.

Every bridge message carries:

- ``route``: the module tag, ``"bridge"`` for all messages here
- ``msg_type``: the stable wire tag of the message kind
- ``signer_field``: name of the single field holding the signer address

and implements ``validate_basic()``. Sign bytes, signers and involved
addresses are derived from those declarations.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from ..config import DEFAULT_NETWORK, Network
from ..exceptions import ValidationError
from .address import ADDR_LEN, AccAddress, EthereumAddress
from .coin import Coin

ROUTE_BRIDGE = "bridge"


class BridgeMsg(BaseModel):
    """Base class for all bridge messages.

    Subclasses declare their fields in wire order, using ``alias=`` where the
    wire name is not a valid Python identifier, and set the class variables
    below.

    Example:
        >>> class Ping(BridgeMsg):
        ...     validator_address: AccAddress
        ...
        ...     msg_type: ClassVar[str] = "crossPing"
        ...     signer_field: ClassVar[str] = "validator_address"
        ...
        ...     def validate_basic(self) -> None:
        ...         check_addr_len(self.validator_address, "validator address")
    """

    model_config = ConfigDict(
        # Messages are never mutated after construction
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    route: ClassVar[str] = ROUTE_BRIDGE
    msg_type: ClassVar[str] = ""
    signer_field: ClassVar[str] = ""

    def signers(self) -> list[AccAddress]:
        """Addresses whose signatures authorize this message."""
        return [getattr(self, self.signer_field)]

    def involved_addresses(self) -> list[AccAddress]:
        """Addresses this message touches, used for indexing."""
        return self.signers()

    def sign_bytes(self, network: Network = DEFAULT_NETWORK) -> bytes:
        """Canonical bytes the signer signs over.

        Args:
            network: Network whose bech32 prefix renders native addresses

        Raises:
            SignBytesError: If the message cannot be serialized
        """
        # Import here to avoid circular dependency
        from ..codec.encoder import encode

        return encode(self, network=network)

    def validate_basic(self) -> None:
        """Reject obviously invalid messages.

        Raises:
            ValidationError: Describing the first rule that failed
        """
        raise NotImplementedError


# Shared validation rules. Each raises ValidationError with the reason used
# across all message kinds.


def check_addr_len(address: AccAddress, name: str) -> None:
    if len(address) != ADDR_LEN:
        raise ValidationError(f"length of {name} should be {ADDR_LEN}")


def check_not_empty(address: EthereumAddress, name: str) -> None:
    if address.is_empty():
        raise ValidationError(f"{name} should not be empty")


def check_positive_coin(coin: Coin, name: str) -> None:
    if not coin.is_positive():
        raise ValidationError(f"{name} should be positive")
