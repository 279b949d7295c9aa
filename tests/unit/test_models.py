"""Tests for the region records."""

from __future__ import annotations

from ipaddress import IPv4Address

import pytest
from pydantic import ValidationError

from regionpatch import RegionInfo, ServerInfo


def test_ip_coerced_from_string() -> None:
    """Test dotted strings become IPv4Address."""
    server = ServerInfo(name="s", ip="127.0.0.1", port=1)
    assert server.ip == IPv4Address("127.0.0.1")


def test_port_range() -> None:
    """Test port is a 16-bit unsigned integer."""
    ServerInfo(name="s", ip="127.0.0.1", port=65535)
    with pytest.raises(ValidationError):
        ServerInfo(name="s", ip="127.0.0.1", port=65536)
    with pytest.raises(ValidationError):
        ServerInfo(name="s", ip="127.0.0.1", port=-1)


def test_version_range() -> None:
    """Test version is a 32-bit unsigned integer."""
    RegionInfo(version=0xFFFFFFFF, name="", to_ping="")
    with pytest.raises(ValidationError):
        RegionInfo(version=1 << 32, name="", to_ping="")


def test_servers_default_empty() -> None:
    """Test servers default to an empty list."""
    assert RegionInfo(version=0, name="", to_ping="").servers == []


def test_long_name_allowed() -> None:
    """Test string length is checked by the encoder, not the model."""
    assert len(RegionInfo(version=0, name="x" * 300, to_ping="").name) == 300


def test_extra_fields_forbidden() -> None:
    """Test unknown fields are rejected."""
    with pytest.raises(ValidationError):
        ServerInfo(name="s", ip="127.0.0.1", port=1, reserved=0)  # type: ignore[call-arg]


def test_validate_assignment() -> None:
    """Test assignment is validated."""
    server = ServerInfo(name="s", ip="127.0.0.1", port=1)
    with pytest.raises(ValidationError):
        server.port = 70000
