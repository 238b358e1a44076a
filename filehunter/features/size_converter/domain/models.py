from dataclasses import dataclass
from typing import Union
from filehunter.core.common.enums import SizeUnit


class InvalidUnitError(ValueError):
    """
    Raised when a size unit is not one of KB, MB or GB.
    This is a configuration error: callers should abort, not skip.
    """
    def __init__(self, unit):
        self.unit = unit
        allowed = ", ".join(u.value for u in SizeUnit)
        super().__init__(f"Invalid size unit {unit!r}, expected one of [{allowed}]")


def parse_unit(value: Union[str, SizeUnit]) -> SizeUnit:
    """Case-insensitive lookup of a SizeUnit."""
    if isinstance(value, SizeUnit):
        return value
    if not isinstance(value, str):
        raise InvalidUnitError(value)
    try:
        return SizeUnit(value.strip().upper())
    except ValueError:
        raise InvalidUnitError(value) from None


@dataclass(frozen=True)
class SizeThreshold:
    """
    Value Object for the minimum (exclusive) file size of a search.
    Accepts the unit as a string and normalizes it to a SizeUnit.
    """
    magnitude: int = 0
    unit: SizeUnit = SizeUnit.KB

    def __post_init__(self):
        # Frozen dataclass: bypass __setattr__ to store the normalized unit
        object.__setattr__(self, "unit", parse_unit(self.unit))
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, int):
            raise ValueError(f"Size magnitude must be an integer, got {self.magnitude!r}")
        if self.magnitude < 0:
            raise ValueError(f"Size magnitude cannot be negative ({self.magnitude}).")

    @property
    def threshold_bytes(self) -> int:
        return self.magnitude * self.unit.multiplier
