"""Utility functions for regionpatch.

This module provides size calculation for region records.
"""

from __future__ import annotations

from .sizing import encoded_size, server_size, string_size

__all__ = [
    "encoded_size",
    "server_size",
    "string_size",
]
