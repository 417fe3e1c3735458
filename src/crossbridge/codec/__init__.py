"""JSON codec for bridge messages.

This module provides the canonical sign-byte encoder and the envelope
encoder/decoder used to move messages between processes.
"""

from __future__ import annotations

from .decoder import decode, decode_envelope
from .encoder import encode, encode_envelope

__all__ = [
    "encode",
    "encode_envelope",
    "decode",
    "decode_envelope",
]
