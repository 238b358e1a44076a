import os
import stat
import logging
from pathlib import Path
from typing import Optional, Sequence, Set

from ..domain.interfaces import IFileWalker
from ..domain.filters import FilterPredicate, matches_any
from ..domain.models import FileMatch, SearchRequest, SearchSummary

logger = logging.getLogger(__name__)

class LocalFileWalker(IFileWalker):
    """
    Concrete implementation on top of os.walk.
    os.walk keeps its own stack of pending directories, so deep trees
    are bounded by memory rather than by the interpreter's recursion limit.
    """

    def walk(self, request: SearchRequest) -> SearchSummary:
        summary = SearchSummary()
        visited: Set[str] = set()  # canonical paths, one set per walk
        threshold = request.threshold.threshold_bytes
        filters = request.filters

        def on_list_error(err: OSError) -> None:
            msg = f"Cannot list directory {err.filename}: {err.strerror or err}"
            logger.warning(msg)
            summary.errors.append(msg)

        for dirpath, dirnames, filenames in os.walk(
            request.root_path,
            onerror=on_list_error,
            followlinks=request.follow_symlinks,
        ):
            # 1. Cycle guard: a symlink may lead back into a directory we already entered
            canonical = os.path.realpath(dirpath)
            if canonical in visited:
                logger.debug(f"Skipping already visited directory: {dirpath}")
                dirnames[:] = []
                continue
            visited.add(canonical)
            summary.directories_visited += 1

            # 2. Prune known directories in-place so os.walk never descends into them
            dirnames[:] = [
                d for d in dirnames
                if os.path.realpath(os.path.join(dirpath, d)) not in visited
            ]

            # 3. Process files
            for filename in filenames:
                match = self._check_file(Path(dirpath) / filename, threshold, filters, summary)
                if match is not None:
                    summary.matches.append(match)

        return summary

    def _check_file(
        self,
        path: Path,
        threshold: int,
        filters: Sequence[FilterPredicate],
        summary: SearchSummary,
    ) -> Optional[FileMatch]:
        try:
            # Follows symlinks: a link to a big file counts as a big file
            info = os.stat(path)
        except OSError as e:
            msg = f"Cannot stat {path}: {e.strerror or e}"
            logger.warning(msg)
            summary.errors.append(msg)
            return None

        if not stat.S_ISREG(info.st_mode):
            return None
        summary.files_checked += 1

        # Size first: strictly greater than the threshold
        if info.st_size <= threshold:
            return None
        if not matches_any(filters, path.name):
            return None

        return FileMatch(path=path, size_bytes=info.st_size)
