"""Configuration for the mock broadcaster."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MockBroadcastConfig:
    """Configuration for MockBroadcaster.

    Attributes:
        failure_rate: Probability that a broadcast raises BroadcastError
            (default 0.0, never fail). Use 1.0 to test error propagation.
        response_code: Result code reported in commit results (default 0).
            A non-zero code produces ``ok=False`` without raising, the way a
            chain reports a rejected transaction.
        log: Log text reported in commit results
        seed: Seed for the failure RNG, for reproducible runs (default None)

    Examples:
        ```python
        from crossbridge.client import MockBroadcaster, MockBroadcastConfig

        # Chain rejects every transaction with code 65546
        broadcaster = MockBroadcaster(MockBroadcastConfig(response_code=65546))

        # Node unreachable half the time, reproducibly
        broadcaster = MockBroadcaster(MockBroadcastConfig(failure_rate=0.5, seed=7))
        ```
    """

    failure_rate: float = 0.0
    response_code: int = 0
    log: str = ""
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 0.0 <= self.failure_rate <= 1.0:
            raise ValueError(f"failure_rate must be 0.0-1.0, got {self.failure_rate}")

        if self.response_code < 0:
            raise ValueError(f"response_code must be >= 0, got {self.response_code}")
