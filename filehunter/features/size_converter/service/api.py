from typing import Union
from filehunter.core.common.enums import SizeUnit
from ..domain.models import SizeThreshold, InvalidUnitError, parse_unit

__all__ = ["to_bytes", "format_bytes", "parse_unit", "InvalidUnitError"]

# Largest first: the first tier the value fills wins
_DISPLAY_TIERS = (SizeUnit.GB, SizeUnit.MB, SizeUnit.KB)


def to_bytes(magnitude: int, unit: Union[str, SizeUnit]) -> int:
    """
    Converts a human size (e.g. 5, "mb") to a byte count.

    Raises:
        InvalidUnitError: unit is not KB, MB or GB.
        ValueError: magnitude is negative.
    """
    return SizeThreshold(magnitude, unit).threshold_bytes


def format_bytes(size: int) -> str:
    """
    Renders a byte count using the largest unit it fills,
    e.g. 1536 -> "1.50 KB", 512 -> "512 B".
    """
    if size < 0:
        raise ValueError(f"Byte count cannot be negative ({size}).")

    for unit in _DISPLAY_TIERS:
        if size >= unit.multiplier:
            return f"{size / unit.multiplier:.2f} {unit.value}"
    return f"{size} B"
