#!/usr/bin/env python3
"""Basic usage example for regionpatch.

This example demonstrates:
1. Building a region with Pydantic records
2. Encoding to the binary region layout
3. Decoding back to records
4. Pointing the region at a private server
"""

from __future__ import annotations

from ipaddress import IPv4Address

from regionpatch import RegionInfo, ServerInfo, decode, encode, encoded_size, set_address


def main() -> None:
    """Run basic usage example."""
    print("=" * 60)
    print("regionpatch Basic Usage Example")
    print("=" * 60)
    print()

    # 1. Build a region
    region = RegionInfo(
        version=1,
        name="North America",
        to_ping="50.116.1.42",
        servers=[
            ServerInfo(name="NA-Master-1", ip=IPv4Address("50.116.1.42"), port=22023),
            ServerInfo(name="NA-Master-2", ip=IPv4Address("50.116.1.43"), port=22023),
        ],
    )
    print(f"Region: {region.name} ({len(region.servers)} servers)")
    print()

    # 2. Encode
    data = encode(region)
    print(f"Encoded size: {len(data)} bytes (predicted {encoded_size(region)})")
    print(f"Hex: {data.hex()}")
    print()

    # 3. Decode
    decoded = decode(data)
    print(f"Round trip OK: {decoded == region}")
    print()

    # 4. Rewrite
    private = set_address(decoded, "10.0.0.5", "Home")
    for server in private.servers:
        print(f"{server.name} -> {server.ip}:{server.port}")


if __name__ == "__main__":
    main()
