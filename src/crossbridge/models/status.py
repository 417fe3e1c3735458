"""Bind request outcome."""

from __future__ import annotations

import enum


class BindStatus(enum.IntEnum):
    """Outcome of a bind request, reported by a validator in UpdateBindMsg.

    Serialized as its integer value.
    """

    SUCCESS = 0
    REJECTED = 1
    TIMEOUT = 2
    INVALID_PARAMETER = 3
