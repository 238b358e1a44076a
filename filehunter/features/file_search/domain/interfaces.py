from abc import ABC, abstractmethod
from .models import SearchRequest, SearchSummary

class IFileWalker(ABC):
    """
    Contract for traversing a filesystem and collecting matches.
    """
    @abstractmethod
    def walk(self, request: SearchRequest) -> SearchSummary:
        """
        Walks request.root_path depth-first and returns every regular file
        larger than the threshold whose name passes the request's filters.
        I/O failures on single entries or subtrees are recorded in the
        summary, never raised.
        """
        pass
