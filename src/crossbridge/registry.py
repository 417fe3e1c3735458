"""Message type registry.

Maps each wire type tag (``crossTransferIn``, ``crossBind``, ...) to its
message class so a ``{"type": ..., "value": ...}`` envelope can be decoded
without knowing the message kind in advance. The bridge messages register
themselves when ``crossbridge.msg`` is imported.
"""

from __future__ import annotations

from .exceptions import DecodeError
from .models.base import BridgeMsg

# Global registry: msg_type -> message class
MSG_REGISTRY: dict[str, type[BridgeMsg]] = {}


def register_msg(msg_class: type[BridgeMsg]) -> None:
    """Register a message class under its ``msg_type`` tag.

    Args:
        msg_class: BridgeMsg subclass with a non-empty msg_type

    Raises:
        ValueError: If msg_type is empty or already registered to another class

    Example:
        >>> register_msg(BindMsg)
        >>> lookup_msg_class("crossBind") is BindMsg
        True
    """
    msg_type = getattr(msg_class, "msg_type", "")
    if not isinstance(msg_type, str) or not msg_type:
        raise ValueError(
            f"{msg_class.__name__} has no msg_type. Cannot register for decoding."
        )

    existing = MSG_REGISTRY.get(msg_type)
    if existing is not None:
        if existing is not msg_class:
            raise ValueError(
                f"Message type {msg_type!r} already registered to {existing.__name__}. "
                f"Cannot register {msg_class.__name__} with the same type."
            )
        # Already registered, no-op
        return

    MSG_REGISTRY[msg_type] = msg_class


def lookup_msg_class(msg_type: str) -> type[BridgeMsg]:
    """Return the class registered for ``msg_type``.

    Raises:
        DecodeError: If no class is registered under that tag
    """
    try:
        return MSG_REGISTRY[msg_type]
    except (KeyError, TypeError):
        raise DecodeError(
            f"Unknown message type {msg_type!r}. "
            f"Registered types: {sorted(MSG_REGISTRY)}"
        ) from None
