"""Constants used throughout the wire type system."""

from __future__ import annotations

from typing import Final

BYTE_ORDER: Final = "little"
"""Byte order of every fixed-width integer on the wire."""
