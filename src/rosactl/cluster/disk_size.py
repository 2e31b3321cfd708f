"""Disk size parsing and validation.

Disk sizes are given as an integer followed by an optional unit, for example
``"300 GiB"``, ``"100GB"`` or ``"1 TiB"``. Decimal units are converted to GiB,
so ``"100GB"`` is 93 GiB.
"""

import logging
import re

from rosactl.utils.errors import (
    DiskSizeOutOfRangeError,
    InvalidDiskSizeError,
    InvalidDiskSizeUnitError,
)

logger = logging.getLogger(__name__)

GIB = 1024**3

MIN_ROOT_DISK_SIZE_GIB = 100
MAX_ROOT_DISK_SIZE_GIB = 16384

# Bytes per unit, keyed by lowercase suffix. No suffix means bytes.
UNIT_MULTIPLIERS: dict[str, int] = {
    "": 1,
    "g": 1000**3,
    "gb": 1000**3,
    "t": 1000**4,
    "tb": 1000**4,
    "gi": 1024**3,
    "gib": 1024**3,
    "ti": 1024**4,
    "tib": 1024**4,
}

_DISK_SIZE_PATTERN = re.compile(r"^(-?[0-9]+)\s*([A-Za-z]*)$")


def parse_disk_size_to_gib(size: str) -> int:
    """Parse a disk size string into whole GiB.

    An empty string means the size is unset and parses to 0. A number without
    a unit is a byte count.

    Args:
        size: Disk size such as "300 GiB", "100GB" or "1 Ti"

    Returns:
        Size in GiB, rounded toward zero

    Raises:
        InvalidDiskSizeUnitError: If the unit is not recognized
        InvalidDiskSizeError: If the string is malformed or negative
    """
    size = size.strip()
    if not size:
        return 0

    match = _DISK_SIZE_PATTERN.match(size)
    if not match:
        raise InvalidDiskSizeError(
            f"invalid disk size '{size}': expected an integer followed by a unit, e.g. '300 GiB'"
        )

    value, unit = int(match.group(1)), match.group(2)
    multiplier = UNIT_MULTIPLIERS.get(unit.lower())
    if multiplier is None:
        raise InvalidDiskSizeUnitError(
            f"invalid disk size unit '{unit}' in '{size}': "
            "must be one of G, GB, Gi, GiB, T, TB, Ti, TiB"
        )

    gib = abs(value) * multiplier // GIB
    if value < 0 and gib > 0:
        raise InvalidDiskSizeError(f"invalid disk size '{size}': must not be negative")

    logger.debug(f"Parsed disk size '{size}' as {gib} GiB")
    return gib


def machine_pool_root_disk_size_validator(size: str) -> None:
    """Validate a machine pool root disk size.

    Args:
        size: Disk size string

    Raises:
        DiskSizeOutOfRangeError: If the size is outside the allowed range
        InvalidDiskSizeError: If the size cannot be parsed
    """
    gib = parse_disk_size_to_gib(size)
    if gib < MIN_ROOT_DISK_SIZE_GIB or gib > MAX_ROOT_DISK_SIZE_GIB:
        raise DiskSizeOutOfRangeError(
            f"invalid root disk size '{gib} GiB': must be between "
            f"{MIN_ROOT_DISK_SIZE_GIB} GiB and {MAX_ROOT_DISK_SIZE_GIB} GiB"
        )
