"""Main CLI entry point for regionpatch."""

from __future__ import annotations

import argparse
import logging
import sys
from ipaddress import AddressValueError, IPv4Address
from pathlib import Path
from typing import Optional, Sequence

from .. import __version__
from ..config import EditConfig
from ..editing import DEFAULT_DISPLAY_NAME, set_address
from ..exceptions import RegionPatchError
from ..files import read_region, write_region
from ..models import RegionInfo
from .dump import format_region, format_region_json

logger = logging.getLogger(__name__)


def _ipv4(value: str) -> IPv4Address:
    try:
        return IPv4Address(value)
    except AddressValueError as e:
        raise argparse.ArgumentTypeError(f"invalid IPv4 address: {value!r}") from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the regionpatch command."""
    parser = argparse.ArgumentParser(
        prog="regionpatch",
        description="regionpatch: Region File Editor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  regionpatch regionInfo.dat                     Print the region
  regionpatch regionInfo.dat -a 10.0.0.5         Point the region at 10.0.0.5
  regionpatch regionInfo.dat -a 10.0.0.5 -n Home Same, with region name "Home"
        """,
    )

    parser.add_argument("path", type=Path, help="Region file to read")

    parser.add_argument(
        "-a",
        "--set-addr",
        metavar="IPV4",
        type=_ipv4,
        help="Replace the servers with a single server at this address and overwrite the file",
    )

    parser.add_argument(
        "-n",
        "--set-name",
        metavar="NAME",
        default=DEFAULT_DISPLAY_NAME,
        help=f"Region name used with --set-addr (default: {DEFAULT_DISPLAY_NAME})",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject trailing bytes after the region record",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the region as JSON",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"regionpatch {__version__}",
    )

    return parser


def run(config: EditConfig) -> RegionInfo:
    """Read the region file and rewrite it if the config asks for it.

    Args:
        config: What to read and how to rewrite it

    Returns:
        The decoded region, or the rewritten one when an address is set

    Raises:
        RegionPatchError: If reading, decoding, encoding or writing fails
    """
    region = read_region(config.path, strict=config.strict)

    if config.address is not None:
        region = set_address(region, config.address, config.display_name)
        logger.info("Pointing %s at %s as %r", config.path, config.address, config.display_name)
        write_region(config.path, region)

    return region


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the regionpatch CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        config = EditConfig(
            path=args.path,
            address=args.set_addr,
            display_name=args.set_name,
            strict=args.strict,
            output_format="json" if args.json else "text",
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        region = run(config)
    except RegionPatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if config.output_format == "json":
        print(format_region_json(region))
    else:
        print(format_region(region))
    return 0


if __name__ == "__main__":
    sys.exit(main())
