"""Library version information."""

from __future__ import annotations

__all__ = ["MAJOR_VERSION", "MINOR_VERSION", "MICRO_VERSION", "version_str", "version_cmp"]

MAJOR_VERSION = 2
MINOR_VERSION = 14
MICRO_VERSION = 0

_VERSION = "2.14"


def version_str() -> str:
    """Return the version as a string; the micro part is omitted when 0."""
    return _VERSION


def version_cmp(major: int, minor: int, micro: int) -> int:
    """Compare with the given version: positive if this one is newer."""
    diff = MAJOR_VERSION - major
    if diff:
        return diff
    diff = MINOR_VERSION - minor
    if diff:
        return diff
    return MICRO_VERSION - micro