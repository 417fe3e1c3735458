"""Exception hierarchy for crossbridge.

Recoverable errors inherit from BridgeError so callers can catch any
crossbridge-specific input problem in one place. SignBytesError sits
outside that tree: it signals broken in-memory state, not bad input.
"""

from __future__ import annotations


class BridgeError(Exception):
    """Base exception for all recoverable crossbridge errors."""

    pass


class DecodeError(BridgeError, ValueError):
    """Raised when external input cannot be decoded.

    Examples:
        - Ethereum address hex with the wrong length or non-hex characters
        - Malformed bech32 native address
        - Message JSON that does not match the message schema
        - Unknown message type tag in an envelope
    """

    pass


class ValidationError(BridgeError):
    """Raised when a message fails its basic validation rules.

    The first failing rule determines the reason. The message is never
    handed to a broadcaster once this is raised.

    Attributes:
        reason: Human-readable description of the failed rule
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class BroadcastError(BridgeError):
    """Raised by broadcaster implementations when submission fails.

    The facade passes these through unchanged.
    """

    pass


class SignBytesError(RuntimeError):
    """Raised when a message cannot be serialized for signing.

    This is fatal: it only happens when a message holds values its own
    schema cannot serialize.
    """

    pass
