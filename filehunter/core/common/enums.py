# File: filehunter/core/common/enums.py

from enum import Enum, unique

@unique
class SizeUnit(str, Enum):
    KB = "KB"
    MB = "MB"
    GB = "GB"

    @property
    def multiplier(self) -> int:
        """Number of bytes in one unit (binary, 1024-based)."""
        return {
            SizeUnit.KB: 1024,
            SizeUnit.MB: 1024 ** 2,
            SizeUnit.GB: 1024 ** 3,
        }[self]
