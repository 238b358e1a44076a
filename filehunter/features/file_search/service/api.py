import logging
from pathlib import Path
from typing import List, Optional, Union

from filehunter.core.common.enums import SizeUnit
from filehunter.core.config.settings import settings
from filehunter.features.size_converter.domain.models import SizeThreshold

from ..domain.models import FileMatch, SearchRequest, SearchSummary
from ..data.file_walker import LocalFileWalker

logger = logging.getLogger(__name__)

class FileFinder:
    """
    Facade for the File Search Feature.
    """
    def __init__(self):
        self.walker = LocalFileWalker()

    def search(self, request: SearchRequest) -> SearchSummary:
        """
        Walks the tree and returns the matches with a report of what was skipped.
        Never raises for filesystem errors; see SearchSummary.errors.
        """
        logger.info(
            f"Starting search of: {request.root_path} "
            f"(size > {request.threshold.magnitude} {request.threshold.unit.value})"
        )

        summary = self.walker.walk(request)

        logger.info(
            f"Search complete. Matched {len(summary.matches)}/{summary.files_checked} files "
            f"in {summary.directories_visited} directories, {len(summary.errors)} errors."
        )
        return summary

def find_files(
    root: Union[str, Path],
    size: int = 0,
    unit: Union[str, SizeUnit] = SizeUnit.KB,
    keyword: Optional[str] = None,
    extension: Optional[str] = None,
    follow_symlinks: Optional[bool] = None,
) -> List[FileMatch]:
    """
    Standalone API: returns the files under root larger than size/unit
    whose name matches the keyword or the extension (either one suffices).

    Raises:
        InvalidUnitError: unit is not KB, MB or GB.
    """
    if follow_symlinks is None:
        follow_symlinks = settings.FOLLOW_SYMLINKS

    request = SearchRequest(
        root_path=Path(root),
        threshold=SizeThreshold(size, unit),
        keyword=keyword,
        extension=extension,
        follow_symlinks=follow_symlinks,
    )
    return finder.search(request).matches

# Singleton Instance for easy import
finder = FileFinder()
