"""Byte-level packing and unpacking utilities.

This module provides the low-level primitives of the region file format:
little-endian unsigned integers, raw byte runs and length-prefixed UTF-8
strings. All reads are bounds-checked against the remaining buffer.
"""

from __future__ import annotations

import struct

from ..exceptions import (
    InvalidTextError,
    TruncatedDataError,
    UnencodableTextError,
    ValueTooLargeError,
)

MAX_STRING_LENGTH = 0xFF
MAX_COUNT = 0xFFFFFFFF

_UINT_FORMATS = {1: "<B", 2: "<H", 4: "<I"}


class BytePacker:
    """Packs values into a growing byte buffer.

    Example:
        >>> packer = BytePacker()
        >>> packer.write_uint(1, size=4)
        >>> packer.write_string("Foo")
        >>> data = packer.to_bytes()
    """

    def __init__(self) -> None:
        """Initialize an empty byte packer."""
        self._buffer = bytearray()

    def write_uint(self, value: int, size: int) -> None:
        """Write an unsigned little-endian integer of ``size`` bytes.

        Args:
            value: Unsigned integer value to write
            size: Width in bytes (1, 2 or 4)

        Raises:
            ValueError: If size is unsupported or value doesn't fit
        """
        fmt = _UINT_FORMATS.get(size)
        if fmt is None:
            raise ValueError(f"size must be 1, 2 or 4, got {size}")

        max_value = (1 << (size * 8)) - 1
        if value < 0 or value > max_value:
            raise ValueError(f"Value {value} doesn't fit in {size} bytes (max: {max_value})")

        self._buffer.extend(struct.pack(fmt, value))

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes as-is."""
        self._buffer.extend(data)

    def write_string(self, value: str) -> None:
        """Write a UTF-8 string prefixed by its one-byte length.

        Raises:
            ValueTooLargeError: If the encoded string is longer than 255 bytes
            UnencodableTextError: If the string cannot be encoded as UTF-8
        """
        encoded = encode_text(value)
        if len(encoded) > MAX_STRING_LENGTH:
            raise ValueTooLargeError(
                f"string is {len(encoded)} bytes, limit is {MAX_STRING_LENGTH}"
            )
        self._buffer.append(len(encoded))
        self._buffer.extend(encoded)

    def byte_length(self) -> int:
        """Return the number of bytes written so far."""
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the packed bytes."""
        return bytes(self._buffer)


class ByteUnpacker:
    """Unpacks values from a byte buffer, left to right.

    Example:
        >>> unpacker = ByteUnpacker(data)
        >>> version = unpacker.read_uint(4)
        >>> name = unpacker.read_string()
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a byte unpacker over ``data``."""
        self._data = memoryview(bytes(data))
        self._position = 0

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read exactly ``num_bytes`` raw bytes.

        Raises:
            TruncatedDataError: If fewer bytes remain
        """
        remaining = self.bytes_remaining()
        if num_bytes > remaining:
            raise TruncatedDataError(f"need {num_bytes} bytes, have {remaining}")

        chunk = self._data[self._position : self._position + num_bytes].tobytes()
        self._position += num_bytes
        return chunk

    def read_uint(self, size: int) -> int:
        """Read an unsigned little-endian integer of ``size`` bytes.

        Raises:
            ValueError: If size is unsupported
            TruncatedDataError: If fewer than ``size`` bytes remain
        """
        fmt = _UINT_FORMATS.get(size)
        if fmt is None:
            raise ValueError(f"size must be 1, 2 or 4, got {size}")

        (value,) = struct.unpack(fmt, self.read_bytes(size))
        return int(value)

    def read_string(self) -> str:
        """Read a one-byte length followed by that many UTF-8 bytes.

        Raises:
            TruncatedDataError: If the length byte or payload is missing
            InvalidTextError: If the payload is not valid UTF-8
        """
        length = self.read_uint(1)
        raw = self.read_bytes(length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidTextError(f"invalid UTF-8 encoding: {e}") from e

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read offset in bytes."""
        return self._position


def encode_text(value: str) -> bytes:
    """Encode ``value`` as UTF-8.

    Raises:
        UnencodableTextError: If the string holds characters UTF-8 cannot encode
    """
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise UnencodableTextError(f"invalid text for UTF-8: {e}") from e
