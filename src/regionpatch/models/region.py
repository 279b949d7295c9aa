"""Region and server records.

A region is a named cluster of game servers. Its binary form is::

    version       u32 LE
    name          u8 length + UTF-8 bytes
    to_ping       u8 length + UTF-8 bytes
    server_count  u32 LE
    servers       server_count server records

and each server record is::

    name          u8 length + UTF-8 bytes
    ip            4 raw octets, network order
    port          u16 LE
    reserved      4 bytes, ignored on read, written as zero
"""

from __future__ import annotations

from ipaddress import IPv4Address

from pydantic import Field

from .base import BaseRecord
from .fields import UInt


class ServerInfo(BaseRecord):
    """A single game server of a region."""

    name: str
    ip: IPv4Address
    port: int = UInt(bits=16)


class RegionInfo(BaseRecord):
    """A region: version tag, display name, ping target and servers."""

    version: int = UInt(bits=32)
    name: str
    to_ping: str
    servers: list[ServerInfo] = Field(default_factory=list)
