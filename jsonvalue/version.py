"""Library version information."""

from __future__ import annotations

MAJOR_VERSION = 2
MINOR_VERSION = 12
MICRO_VERSION = 0

VERSION = (
    f"{MAJOR_VERSION}.{MINOR_VERSION}"
    if MICRO_VERSION == 0
    else f"{MAJOR_VERSION}.{MINOR_VERSION}.{MICRO_VERSION}"
)


def version_str() -> str:
    """Return the library version as a string."""
    return VERSION


def version_cmp(major: int, minor: int, micro: int) -> int:
    """Compare the library version with the given one.

    The result is positive if the library is newer, negative if older and
    zero if equal.
    """
    diff = MAJOR_VERSION - major
    if diff:
        return diff
    diff = MINOR_VERSION - minor
    if diff:
        return diff
    return MICRO_VERSION - micro