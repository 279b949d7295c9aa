"""Exception hierarchy for regionpatch.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from RegionPatchError for easy catching of any
regionpatch-specific error.
"""

from __future__ import annotations


class RegionPatchError(Exception):
    """Base exception for all regionpatch errors."""

    pass


class DecodeError(RegionPatchError):
    """Raised when decoding a region file fails.

    Examples:
        - Truncated data (insufficient bytes)
        - String payload that is not valid UTF-8
        - Leftover bytes when decoding in strict mode
    """

    pass


class TruncatedDataError(DecodeError):
    """Raised when the buffer ends before a required field could be read."""

    pass


class InvalidTextError(DecodeError):
    """Raised when a length-prefixed string is not valid UTF-8."""

    pass


class TrailingDataError(DecodeError):
    """Raised by strict decoding when bytes remain after the record."""

    pass


class EncodeError(RegionPatchError):
    """Raised when encoding a region fails.

    Examples:
        - String longer than 255 bytes (single-byte length prefix)
        - More servers than fit in the 32-bit count field
    """

    pass


class ValueTooLargeError(EncodeError):
    """Raised when a value does not fit in its length or count field."""

    pass


class TooManyEntriesError(ValueTooLargeError):
    """Raised when the server list exceeds the 32-bit count range."""

    pass


class UnencodableTextError(EncodeError):
    """Raised when a string cannot be encoded as UTF-8 (e.g. lone surrogates)."""

    pass


class RegionIOError(RegionPatchError):
    """Raised when reading or writing a region file fails.

    Examples:
        - Missing file or bad permissions
        - Disk full while writing
    """

    pass
