"""Region rewriting.

This module provides set_address(), which points a region at a single
replacement server.
"""

from __future__ import annotations

from ipaddress import IPv4Address
from typing import Union

from .models import RegionInfo, ServerInfo

MASTER_PORT = 22023
DEFAULT_DISPLAY_NAME = "Imposter"


def set_address(
    region: RegionInfo,
    address: Union[IPv4Address, str],
    display_name: str = DEFAULT_DISPLAY_NAME,
) -> RegionInfo:
    """Return a copy of ``region`` that points at a single server.

    The server list is replaced by one master server named
    ``"{display_name}-Master-1"`` listening on port 22023 at ``address``.
    The region name becomes ``display_name`` and the ping target becomes the
    dotted-decimal form of ``address``. The version is kept.

    Args:
        region: Region to rewrite (left unchanged)
        address: Replacement server address
        display_name: Name shown for the region

    Returns:
        Rewritten region

    Example:
        >>> region = set_address(region, "10.0.0.5", "Bar")
        >>> region.servers[0].name
        'Bar-Master-1'
    """
    ip = IPv4Address(address)
    master = ServerInfo(name=f"{display_name}-Master-1", ip=ip, port=MASTER_PORT)
    return RegionInfo(
        version=region.version,
        name=display_name,
        to_ping=str(ip),
        servers=[master],
    )
