"""Key manager interface.

Only the signer's native address is needed to build a message; signing itself
belongs to the broadcaster.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models.address import AccAddress


class KeyManager(ABC):
    """Supplies the native address of the account that signs messages."""

    @abstractmethod
    def current_address(self) -> AccAddress:
        pass


class StaticKeyManager(KeyManager):
    """Key manager that always returns the same address."""

    def __init__(self, address: AccAddress) -> None:
        self.address = address

    def current_address(self) -> AccAddress:
        return self.address
