"""Region file decoder.

This module provides the decode() function that parses the binary region
layout into a RegionInfo instance.
"""

from __future__ import annotations

import logging
from ipaddress import IPv4Address
from typing import Callable, TypeVar

from ..exceptions import DecodeError, TrailingDataError, TruncatedDataError
from ..models import RegionInfo, ServerInfo
from .bytepack import ByteUnpacker

logger = logging.getLogger(__name__)

T = TypeVar("T")


def decode(data: bytes, *, strict: bool = False) -> RegionInfo:
    """Decode a binary region record.

    Fields are read left to right with every read bounds-checked. By default
    the record is parsed as a prefix of ``data``: bytes left over after the
    last server record are ignored. Pass ``strict=True`` to reject them.

    Args:
        data: Binary data to decode
        strict: If True, raise TrailingDataError when bytes remain

    Returns:
        Decoded region

    Raises:
        TruncatedDataError: If data ends before a required field
        InvalidTextError: If a string field is not valid UTF-8
        TrailingDataError: If strict and bytes remain after the record

    Examples:
        ```python
        from regionpatch import decode

        region = decode(Path("regionInfo.dat").read_bytes())
        print(region.name, len(region.servers))
        ```
    """
    region, consumed = decode_prefix(data)

    trailing = len(data) - consumed
    if trailing:
        if strict:
            raise TrailingDataError(
                f"{trailing} trailing bytes after region record ({consumed} bytes)"
            )
        logger.debug("Ignoring %d trailing bytes after region record", trailing)

    return region


def decode_prefix(data: bytes) -> tuple[RegionInfo, int]:
    """Decode a region record from the start of ``data``.

    Args:
        data: Binary data beginning with a region record

    Returns:
        Tuple of (region, number of bytes consumed)

    Raises:
        TruncatedDataError: If data ends before a required field
        InvalidTextError: If a string field is not valid UTF-8
    """
    unpacker = ByteUnpacker(data)

    version = _read_field(unpacker, "version", lambda: unpacker.read_uint(4))
    name = _read_field(unpacker, "name", unpacker.read_string)
    to_ping = _read_field(unpacker, "to_ping", unpacker.read_string)
    count = _read_field(unpacker, "server_count", lambda: unpacker.read_uint(4))

    # Grow one record at a time; count comes from untrusted input.
    servers: list[ServerInfo] = []
    for index in range(count):
        servers.append(_decode_server(unpacker, index))

    logger.debug(
        "Decoded region %r: %d servers, %d bytes", name, len(servers), unpacker.position()
    )

    region = RegionInfo(version=version, name=name, to_ping=to_ping, servers=servers)
    return region, unpacker.position()


def _decode_server(unpacker: ByteUnpacker, index: int) -> ServerInfo:
    """Decode a single server record.

    Args:
        unpacker: ByteUnpacker positioned at the record
        index: Position of the record in the server list, for error context

    Returns:
        Decoded server

    Raises:
        DecodeError: If the record is truncated or its name is not UTF-8
    """
    prefix = f"servers[{index}]"

    name = _read_field(unpacker, f"{prefix}.name", unpacker.read_string)
    octets = _read_field(unpacker, f"{prefix}.ip", lambda: unpacker.read_bytes(4))
    port = _read_field(unpacker, f"{prefix}.port", lambda: unpacker.read_uint(2))
    # Reserved slot: must be present, value is not kept
    _read_field(unpacker, f"{prefix}.reserved", lambda: unpacker.read_bytes(4))

    return ServerInfo(name=name, ip=IPv4Address(octets), port=port)


def _read_field(unpacker: ByteUnpacker, field_name: str, read: Callable[[], T]) -> T:
    """Run ``read`` and re-raise decode failures with the field name attached."""
    offset = unpacker.position()
    try:
        return read()
    except TruncatedDataError as e:
        raise TruncatedDataError(
            f"Truncated data while decoding {field_name} at offset {offset}: {e}"
        ) from e
    except DecodeError as e:
        raise type(e)(f"Error decoding {field_name} at offset {offset}: {e}") from e
