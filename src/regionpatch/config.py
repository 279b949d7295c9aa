"""Configuration for a region file edit.

This module provides the EditConfig dataclass describing one run of the
editor: which file to read, and what to rewrite it to, if anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from ipaddress import IPv4Address
from pathlib import Path
from typing import Literal, Optional

from .editing import DEFAULT_DISPLAY_NAME

OutputFormat = Literal["text", "json"]


@dataclass
class EditConfig:
    """Configuration for reading and optionally rewriting a region file.

    Attributes:
        path: Region file to read (and overwrite when address is set)
        address: Replacement server address. None leaves the file untouched
            and only prints its contents.
        display_name: Region name used with address (default "Imposter")
        strict: Reject bytes left over after the region record
        output_format: "text" for the readable dump, "json" for JSON

    Examples:
        ```python
        from regionpatch.config import EditConfig

        # Print only
        config = EditConfig(path=Path("regionInfo.dat"))

        # Point the region at a private server
        config = EditConfig(
            path=Path("regionInfo.dat"),
            address=IPv4Address("10.0.0.5"),
            display_name="Home",
        )
        ```
    """

    path: Path
    address: Optional[IPv4Address] = None
    display_name: str = DEFAULT_DISPLAY_NAME
    strict: bool = False
    output_format: OutputFormat = "text"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self.path = Path(self.path)

        if self.address is not None and not isinstance(self.address, IPv4Address):
            self.address = IPv4Address(self.address)

        if self.output_format not in ("text", "json"):
            raise ValueError(f"output_format must be 'text' or 'json', got {self.output_format!r}")
