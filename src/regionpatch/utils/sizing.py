"""Region size calculation utilities.

This module provides functions to calculate the encoded size of a region
without actually encoding it.
"""

from __future__ import annotations

from ..codec.bytepack import encode_text
from ..models import RegionInfo, ServerInfo

# version + server_count
REGION_FIXED_BYTES = 4 + 4
# ip + port + reserved
SERVER_FIXED_BYTES = 4 + 2 + 4


def string_size(value: str) -> int:
    """Size of a length-prefixed string: one length byte plus UTF-8 bytes.

    Raises:
        UnencodableTextError: If the string cannot be encoded as UTF-8
    """
    return 1 + len(encode_text(value))


def server_size(server: ServerInfo) -> int:
    """Calculate the encoded size of a server record in bytes."""
    return string_size(server.name) + SERVER_FIXED_BYTES


def encoded_size(region: RegionInfo) -> int:
    """Calculate the encoded size of a region in bytes.

    The result matches ``len(encode(region))`` for any region that encodes
    successfully. Oversized strings are counted as they are and not rejected.

    Args:
        region: Region to measure

    Returns:
        Size in bytes

    Example:
        >>> encoded_size(RegionInfo(version=0, name="A", to_ping="", servers=[]))
        11
    """
    return (
        REGION_FIXED_BYTES
        + string_size(region.name)
        + string_size(region.to_ping)
        + sum(server_size(server) for server in region.servers)
    )
