"""Native coin value type."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .fields import Int64


class Coin(BaseModel):
    """An amount of a native-chain denomination.

    Example:
        >>> coin = Coin(denom="BNB", amount=100000000)
        >>> str(coin)
        '100000000BNB'
        >>> coin.is_positive()
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    denom: str
    amount: int = Int64()

    def is_positive(self) -> bool:
        """True when the amount is above zero and the denomination is set."""
        return self.amount > 0 and len(self.denom) > 0

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"
