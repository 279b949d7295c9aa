"""Human-readable rendering of a region."""

from __future__ import annotations

from ..models import RegionInfo
from ..utils.sizing import encoded_size

WIDTH = 54


def _line(label: str, value: object, indent: int = 0) -> str:
    text = str(value)
    dots = "." * max(1, WIDTH - indent - len(label) - len(text))
    return f"{' ' * indent}{label}{dots}{text}"


def format_region(region: RegionInfo) -> str:
    """Render a region as an aligned text dump.

    Args:
        region: Region to render

    Returns:
        Multi-line text, without a trailing newline
    """
    lines = [
        f"{'=' * 19} Region: {region.name} {'=' * 19}",
        _line("version", region.version),
        _line("to_ping", region.to_ping),
        _line("encoded size", f"{encoded_size(region)} bytes"),
        "",
        f"{'-' * 24} Servers ({len(region.servers)}) {'-' * 24}",
    ]

    for i, server in enumerate(region.servers, 1):
        lines.append(_line(f"{i}. {server.name}", f"{server.ip}:{server.port}", indent=8))

    return "\n".join(lines)


def format_region_json(region: RegionInfo) -> str:
    """Render a region as indented JSON."""
    return region.model_dump_json(indent=2)
