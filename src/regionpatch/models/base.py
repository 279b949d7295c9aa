"""Base record class and regionpatch-specific Pydantic configuration.

This module provides the BaseRecord class that the region file records
inherit from.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseRecord(BaseModel):
    """Base class for all records of the region file format.

    Records declare their fields in wire order. String length limits are not
    enforced here: the single-byte length prefix is checked by the encoder so
    that an oversized value is reported instead of rejected on construction.
    """

    model_config = ConfigDict(
        # Coerce dotted strings to IPv4Address and similar
        strict=False,
        # Validate on assignment
        validate_assignment=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )
