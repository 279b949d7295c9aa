"""Property-based tests using hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from regionpatch import (
    RegionInfo,
    ServerInfo,
    TruncatedDataError,
    ValueTooLargeError,
    decode,
    encode,
    encoded_size,
)

# At most 4 UTF-8 bytes per character keeps these within the 255-byte limit.
short_text = st.text(max_size=63)

servers = st.builds(
    ServerInfo,
    name=short_text,
    ip=st.ip_addresses(v=4),
    port=st.integers(min_value=0, max_value=0xFFFF),
)

regions = st.builds(
    RegionInfo,
    version=st.integers(min_value=0, max_value=0xFFFFFFFF),
    name=short_text,
    to_ping=short_text,
    servers=st.lists(servers, max_size=8),
)


class TestCodecProperties:
    """Property-based tests for codec."""

    @given(region=regions)
    def test_encode_decode_roundtrip(self, region: RegionInfo) -> None:
        """Test encode/decode is invertible."""
        assert decode(encode(region)) == region

    @given(region=regions)
    def test_encode_deterministic(self, region: RegionInfo) -> None:
        """Test encoding the same value twice gives the same bytes."""
        assert encode(region) == encode(region.model_copy(deep=True))

    @given(region=regions, garbage=st.binary(min_size=1, max_size=32))
    def test_trailing_garbage_ignored(self, region: RegionInfo, garbage: bytes) -> None:
        """Test decoding a prefix ignores what follows."""
        assert decode(encode(region) + garbage) == region

    @given(region=regions, data=st.data())
    def test_truncation_detected(self, region: RegionInfo, data: st.DataObject) -> None:
        """Test every proper prefix fails with a truncation error."""
        encoded = encode(region)
        cut = data.draw(st.integers(min_value=0, max_value=len(encoded) - 1))

        with pytest.raises(TruncatedDataError):
            decode(encoded[:cut])

    @given(region=regions)
    def test_encoded_size_matches(self, region: RegionInfo) -> None:
        """Test the size calculation agrees with the encoder."""
        assert encoded_size(region) == len(encode(region))

    @given(name=st.text(min_size=256, max_size=300))
    def test_oversized_name_rejected(self, name: str) -> None:
        """Test names over 255 bytes never encode."""
        with pytest.raises(ValueTooLargeError):
            encode(RegionInfo(version=0, name=name, to_ping=""))
