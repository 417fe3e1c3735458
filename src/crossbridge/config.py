"""Network and client configuration.

Configuration is held in plain dataclasses validated in ``__post_init__``.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Mapping

NETWORK_ENV = "CROSSBRIDGE_NETWORK"
SYNC_ENV = "CROSSBRIDGE_SYNC"

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


class Network(enum.Enum):
    """Native chain network. The value is the bech32 address prefix."""

    MAINNET = "bnb"
    TESTNET = "tbnb"

    @property
    def hrp(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Network:
        """Look up a network by name (``mainnet``/``testnet``) or prefix."""
        key = name.strip().lower()
        for network in cls:
            if key in (network.name.lower(), network.value):
                return network
        raise ValueError(f"unknown network {name!r}, expected mainnet or testnet")


DEFAULT_NETWORK = Network.MAINNET


@dataclass
class BridgeConfig:
    """Configuration for a BridgeClient.

    Attributes:
        network: Network whose address prefix is used in sign bytes
            (default MAINNET).
        sync: Default broadcast mode for facade operations when the caller
            does not pass one (default True, wait for the commit result).

    Examples:
        ```python
        from crossbridge.config import BridgeConfig, Network

        config = BridgeConfig(network=Network.TESTNET, sync=False)

        # Or from CROSSBRIDGE_NETWORK / CROSSBRIDGE_SYNC
        config = BridgeConfig.from_env()
        ```
    """

    network: Network = DEFAULT_NETWORK
    sync: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not isinstance(self.network, Network):
            raise ValueError(f"network must be a Network, got {self.network!r}")

        if not isinstance(self.sync, bool):
            raise ValueError(f"sync must be a bool, got {self.sync!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BridgeConfig:
        """Build a config from environment variables, falling back to defaults.

        Args:
            environ: Mapping to read from (default ``os.environ``)

        Raises:
            ValueError: If a variable is set to an unrecognised value
        """
        env = os.environ if environ is None else environ

        network = DEFAULT_NETWORK
        if env.get(NETWORK_ENV):
            network = Network.from_name(env[NETWORK_ENV])

        sync = True
        raw_sync = env.get(SYNC_ENV)
        if raw_sync:
            value = raw_sync.strip().lower()
            if value in _TRUE:
                sync = True
            elif value in _FALSE:
                sync = False
            else:
                raise ValueError(f"{SYNC_ENV} must be a boolean, got {raw_sync!r}")

        return cls(network=network, sync=sync)
