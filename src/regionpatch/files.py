"""Reading and writing region files on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from .codec import decode, encode
from .exceptions import DecodeError, EncodeError, RegionIOError
from .models import RegionInfo

logger = logging.getLogger(__name__)


def read_region(path: Path, *, strict: bool = False) -> RegionInfo:
    """Read and decode a region file.

    Args:
        path: File to read
        strict: Reject bytes left over after the region record

    Raises:
        RegionIOError: If the file cannot be read
        DecodeError: If the contents are not a valid region record
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise RegionIOError(f"Unable to open file {path}: {e}") from e

    logger.debug("Read %d bytes from %s", len(data), path)
    try:
        return decode(data, strict=strict)
    except DecodeError as e:
        raise type(e)(f"Parsing {path} failed: {e}") from e


def write_region(path: Path, region: RegionInfo) -> int:
    """Encode a region and overwrite ``path`` with it.

    The region is encoded before the file is opened, so an encoding error
    leaves the existing file intact.

    Returns:
        Number of bytes written

    Raises:
        EncodeError: If the region cannot be encoded
        RegionIOError: If the file cannot be created or written
    """
    try:
        data = encode(region)
    except EncodeError as e:
        raise type(e)(f"Failed to encode region for {path}: {e}") from e

    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise RegionIOError(f"Failed to overwrite file {path}: {e}") from e

    logger.info("Wrote %d bytes to %s", len(data), path)
    return len(data)
