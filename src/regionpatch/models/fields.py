"""Field type helpers.

This module provides convenience functions for declaring fixed-width
unsigned integer fields of the region file format.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo


def UInt(*, bits: int, **kwargs: Any) -> FieldInfo:
    """Create an unsigned integer field of a fixed bit width.

    This is a convenience wrapper around Pydantic's Field() that sets the
    ge=0 and le=2**bits-1 constraints matching the stored width.

    Args:
        bits: Stored width in bits (8, 16 or 32)
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Record(BaseRecord):
        ...     port: int = UInt(bits=16)
    """
    if bits not in (8, 16, 32):
        raise ValueError(f"bits must be 8, 16 or 32, got {bits}")

    return cast(FieldInfo, Field(ge=0, le=(1 << bits) - 1, **kwargs))
