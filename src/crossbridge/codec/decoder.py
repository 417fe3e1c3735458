"""JSON decoder for bridge messages."""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import DecodeError
from ..models.base import BridgeMsg
from ..registry import lookup_msg_class

T = TypeVar("T", bound=BridgeMsg)


def decode(msg_class: type[T], data: bytes | str) -> T:
    """Decode a message of a known kind from its JSON form.

    Accepts the output of ``encode()`` (sign bytes) for any network prefix.

    Args:
        msg_class: Message class to decode into
        data: JSON bytes or text

    Returns:
        Decoded message instance

    Raises:
        DecodeError: If the JSON is malformed or does not match the message
    """
    try:
        return msg_class.model_validate_json(data)
    except PydanticValidationError as e:
        raise DecodeError(f"Error decoding {msg_class.__name__}: {e}") from e


def decode_envelope(data: bytes | str) -> BridgeMsg:
    """Decode a ``{"type": ..., "value": ...}`` envelope.

    The message class is looked up in the registry by type tag.

    Raises:
        DecodeError: If the envelope is malformed, the type is unknown, or the
            value does not match the message
    """
    try:
        envelope: Any = json.loads(data)
    except ValueError as e:
        raise DecodeError(f"Envelope is not valid JSON: {e}") from e

    if not isinstance(envelope, dict) or "type" not in envelope or "value" not in envelope:
        raise DecodeError("Envelope must be a JSON object with 'type' and 'value' keys")

    if not isinstance(envelope["type"], str):
        raise DecodeError(
            f"Envelope type must be a string, got {type(envelope['type']).__name__}"
        )

    msg_class = lookup_msg_class(envelope["type"])
    try:
        return msg_class.model_validate(envelope["value"])
    except PydanticValidationError as e:
        raise DecodeError(f"Error decoding {msg_class.__name__}: {e}") from e
