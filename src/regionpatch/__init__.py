"""regionpatch: Region File Editor

A Python library and command-line tool for the binary region files that tell a
game client which servers make up a region. It decodes a region file into
Pydantic models, can point the region at a single replacement server, and
encodes it back to the same byte layout.

Key Features:
- Pydantic-based RegionInfo / ServerInfo records
- Bounds-checked decoder with field-level error context
- Encoder that reports oversized values instead of truncating them
- Pure Python implementation

Quick Start:
    >>> from regionpatch import decode, encode, set_address
    >>>
    >>> region = decode(data)
    >>> region = set_address(region, "10.0.0.5", "Home")
    >>> data = encode(region)
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import decode, decode_prefix, encode, encode_to
from .config import EditConfig
from .editing import DEFAULT_DISPLAY_NAME, MASTER_PORT, set_address
from .exceptions import (
    DecodeError,
    EncodeError,
    InvalidTextError,
    RegionIOError,
    RegionPatchError,
    TooManyEntriesError,
    TrailingDataError,
    TruncatedDataError,
    UnencodableTextError,
    ValueTooLargeError,
)
from .files import read_region, write_region
from .models import RegionInfo, ServerInfo
from .utils import encoded_size

__all__ = [
    # Core API
    "RegionInfo",
    "ServerInfo",
    "encode",
    "encode_to",
    "decode",
    "decode_prefix",
    # Editing
    "set_address",
    "MASTER_PORT",
    "DEFAULT_DISPLAY_NAME",
    "EditConfig",
    # Files
    "read_region",
    "write_region",
    # Exceptions
    "RegionPatchError",
    "DecodeError",
    "TruncatedDataError",
    "InvalidTextError",
    "TrailingDataError",
    "EncodeError",
    "ValueTooLargeError",
    "TooManyEntriesError",
    "UnencodableTextError",
    "RegionIOError",
    # Sizing
    "encoded_size",
    # Version
    "__version__",
]
