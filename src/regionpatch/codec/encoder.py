"""Region file encoder.

This module provides the encode() function that serializes a RegionInfo
instance back to the binary region layout.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from ..exceptions import EncodeError, RegionIOError, TooManyEntriesError
from ..models import RegionInfo, ServerInfo
from .bytepack import MAX_COUNT, BytePacker

logger = logging.getLogger(__name__)

RESERVED = b"\x00\x00\x00\x00"


def encode(region: RegionInfo) -> bytes:
    """Encode a region to its binary layout.

    Fields are written in declaration order. Each length or count is checked
    before the field is appended, so an oversized value is reported instead of
    being truncated. The reserved slot of every server record is written as
    zero, whatever value the record was decoded from.

    Args:
        region: Region to encode

    Returns:
        Binary representation

    Raises:
        ValueTooLargeError: If a string is longer than 255 bytes
        UnencodableTextError: If a string cannot be encoded as UTF-8
        TooManyEntriesError: If there are more than 2**32-1 servers

    Examples:
        ```python
        from regionpatch import RegionInfo, encode

        data = encode(RegionInfo(version=0, name="A", to_ping="", servers=[]))
        assert data == b"\\x00\\x00\\x00\\x00\\x01A\\x00\\x00\\x00\\x00\\x00"
        ```
    """
    packer = BytePacker()

    packer.write_uint(region.version, 4)
    _write_string(packer, "name", region.name)
    _write_string(packer, "to_ping", region.to_ping)

    count = len(region.servers)
    if count > MAX_COUNT:
        raise TooManyEntriesError(f"Too many servers: {count} (limit is {MAX_COUNT})")
    packer.write_uint(count, 4)

    for index, server in enumerate(region.servers):
        _encode_server(packer, index, server)

    logger.debug("Encoded region %r: %d bytes", region.name, packer.byte_length())
    return packer.to_bytes()


def encode_to(region: RegionInfo, sink: BinaryIO) -> int:
    """Encode a region and write it to a binary sink.

    The whole record is encoded before anything is written, so an encoding
    error leaves the sink untouched.

    Args:
        region: Region to encode
        sink: Writable binary file object

    Returns:
        Number of bytes written

    Raises:
        EncodeError: If the region cannot be encoded
        RegionIOError: If writing to the sink fails
    """
    data = encode(region)
    try:
        sink.write(data)
        sink.flush()
    except OSError as e:
        raise RegionIOError(f"Failed to write region data: {e}") from e
    return len(data)


def _encode_server(packer: BytePacker, index: int, server: ServerInfo) -> None:
    """Encode a single server record."""
    _write_string(packer, f"servers[{index}].name", server.name)
    packer.write_bytes(server.ip.packed)
    packer.write_uint(server.port, 2)
    packer.write_bytes(RESERVED)


def _write_string(packer: BytePacker, field_name: str, value: str) -> None:
    try:
        packer.write_string(value)
    except EncodeError as e:
        raise type(e)(f"Invalid value for {field_name}: {e}") from e
