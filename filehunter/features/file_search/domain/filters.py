from dataclasses import dataclass
from pathlib import PurePath
from typing import List, Optional, Sequence, Union


@dataclass(frozen=True)
class KeywordFilter:
    """
    Matches when the keyword appears in the file's base name,
    extension stripped, ignoring case.
    Surrounding whitespace is dropped, as for ExtensionFilter.
    """
    keyword: str

    def __post_init__(self):
        object.__setattr__(self, "keyword", self.keyword.strip())

    def matches(self, name: str) -> bool:
        stem = PurePath(name).stem
        return self.keyword.lower() in stem.lower()


@dataclass(frozen=True)
class ExtensionFilter:
    """
    Matches the file's final extension exactly, ignoring case.
    "txt", ".txt" and ".TXT" are all stored as ".txt".
    """
    extension: str

    def __post_init__(self):
        ext = self.extension.strip().lower()
        if ext and not ext.startswith("."):
            ext = f".{ext}"
        object.__setattr__(self, "extension", ext)

    def matches(self, name: str) -> bool:
        return PurePath(name).suffix.lower() == self.extension


FilterPredicate = Union[KeywordFilter, ExtensionFilter]


def build_filters(keyword: Optional[str] = None, extension: Optional[str] = None) -> List[FilterPredicate]:
    """Blank or missing values mean 'not supplied' and produce no filter."""
    filters: List[FilterPredicate] = []
    if keyword and keyword.strip():
        filters.append(KeywordFilter(keyword))
    if extension and extension.strip().lstrip("."):
        filters.append(ExtensionFilter(extension))
    return filters


def matches_any(filters: Sequence[FilterPredicate], name: str) -> bool:
    """
    Filters are OR-combined: with no filters every name matches,
    otherwise one matching filter is enough.
    """
    if not filters:
        return True
    return any(f.matches(name) for f in filters)
