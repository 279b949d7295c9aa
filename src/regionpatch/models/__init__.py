"""Pydantic models of the region file records.

This module provides the RegionInfo and ServerInfo records and the field
helpers they are built from.
"""

from __future__ import annotations

from .base import BaseRecord
from .fields import UInt
from .region import RegionInfo, ServerInfo

__all__ = [
    "BaseRecord",
    "RegionInfo",
    "ServerInfo",
    "UInt",
]
