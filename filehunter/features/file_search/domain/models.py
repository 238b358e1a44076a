from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from filehunter.features.size_converter.domain.models import SizeThreshold
from .filters import FilterPredicate, build_filters

@dataclass(frozen=True)
class FileMatch:
    """
    A regular file that passed the size test and the name filters.
    """
    path: Path
    size_bytes: int

@dataclass(frozen=True)
class SearchRequest:
    """
    User intent to search a directory tree.
    An invalid unit or negative size fails here, before any I/O.
    """
    root_path: Path
    threshold: SizeThreshold = field(default_factory=SizeThreshold)
    keyword: Optional[str] = None
    extension: Optional[str] = None
    follow_symlinks: bool = True

    def __post_init__(self):
        object.__setattr__(self, "root_path", Path(self.root_path))

    @property
    def filters(self) -> List[FilterPredicate]:
        return build_filters(self.keyword, self.extension)

@dataclass
class SearchSummary:
    """
    Report returned after a walk completes.
    """
    matches: List[FileMatch] = field(default_factory=list)
    directories_visited: int = 0
    files_checked: int = 0
    errors: List[str] = field(default_factory=list)
