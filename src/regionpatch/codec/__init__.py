"""Binary codec for region files.

This module provides decoding and encoding of the region file layout and the
byte-level primitives they are built on.
"""

from __future__ import annotations

from .bytepack import BytePacker, ByteUnpacker
from .decoder import decode, decode_prefix
from .encoder import encode, encode_to

__all__ = [
    "encode",
    "encode_to",
    "decode",
    "decode_prefix",
    "BytePacker",
    "ByteUnpacker",
]
