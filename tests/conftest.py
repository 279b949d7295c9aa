"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import struct
from ipaddress import IPv4Address
from pathlib import Path

import pytest

from regionpatch import RegionInfo, ServerInfo


def server_record(name: str, ip: str, port: int, reserved: int = 0) -> bytes:
    """Build a server record by hand, independently of the encoder."""
    raw_name = name.encode("utf-8")
    return (
        bytes([len(raw_name)])
        + raw_name
        + IPv4Address(ip).packed
        + struct.pack("<H", port)
        + struct.pack("<I", reserved)
    )


def region_record(version: int, name: str, to_ping: str, servers: list[bytes]) -> bytes:
    """Build a region record by hand, independently of the encoder."""
    raw_name = name.encode("utf-8")
    raw_ping = to_ping.encode("utf-8")
    return (
        struct.pack("<I", version)
        + bytes([len(raw_name)])
        + raw_name
        + bytes([len(raw_ping)])
        + raw_ping
        + struct.pack("<I", len(servers))
        + b"".join(servers)
    )


@pytest.fixture
def sample_region() -> RegionInfo:
    """Region with two servers."""
    return RegionInfo(
        version=1,
        name="Foo",
        to_ping="1.2.3.4",
        servers=[
            ServerInfo(name="Foo-Master-1", ip=IPv4Address("1.2.3.4"), port=22023),
            ServerInfo(name="Foo-Master-2", ip=IPv4Address("5.6.7.8"), port=22024),
        ],
    )


@pytest.fixture
def sample_bytes() -> bytes:
    """Binary form of sample_region."""
    return region_record(
        1,
        "Foo",
        "1.2.3.4",
        [
            server_record("Foo-Master-1", "1.2.3.4", 22023),
            server_record("Foo-Master-2", "5.6.7.8", 22024),
        ],
    )


@pytest.fixture
def region_file(tmp_path: Path, sample_bytes: bytes) -> Path:
    """sample_bytes written to a temporary file."""
    path = tmp_path / "regionInfo.dat"
    path.write_bytes(sample_bytes)
    return path


@pytest.fixture
def build_server():
    """Hand-written server record builder."""
    return server_record


@pytest.fixture
def build_region():
    """Hand-written region record builder."""
    return region_record
