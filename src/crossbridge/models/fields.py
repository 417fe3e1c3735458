"""Fixed-width integer field helpers.

Wire integers on the native chain are fixed-width. These helpers bound a
pydantic ``int`` field to the machine range so out-of-range values are
rejected at construction rather than producing sign bytes no other client
could reproduce. Strings, floats and bools are not coerced to ``int``.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo


def FixedInt(*, bits: int, **kwargs: Any) -> FieldInfo:
    """Create a signed fixed-width integer field.

    Args:
        bits: Width in bits (8, 16, 32 or 64)
        **kwargs: Additional Field() arguments (alias, description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Msg(BridgeMsg):
        ...     contract_decimals: int = FixedInt(bits=8)
    """
    if bits not in (8, 16, 32, 64):
        raise ValueError(f"bits must be 8, 16, 32 or 64, got {bits}")

    return cast(
        FieldInfo,
        Field(ge=-(2 ** (bits - 1)), le=2 ** (bits - 1) - 1, strict=True, **kwargs),
    )


def Int64(**kwargs: Any) -> FieldInfo:
    return FixedInt(bits=64, **kwargs)


def Int8(**kwargs: Any) -> FieldInfo:
    return FixedInt(bits=8, **kwargs)
