import re
from typing import Iterable, Optional

from rich.console import Console
from rich.text import Text

from filehunter.core.config.settings import settings
from filehunter.features.file_search.domain.filters import ExtensionFilter, KeywordFilter
from filehunter.features.file_search.domain.models import FileMatch
from filehunter.features.size_converter.service.api import format_bytes

def render_match(
    match: FileMatch,
    keyword: Optional[str] = None,
    extension: Optional[str] = None,
    style: Optional[str] = None,
) -> Text:
    """
    Builds one output line: "<path> <size>".
    Keyword occurrences anywhere in the path and the trailing extension
    are highlighted, ignoring case.
    """
    style = style or settings.HIGHLIGHT_STYLE
    line = Text(str(match.path))

    if keyword and keyword.strip():
        line.highlight_words([KeywordFilter(keyword).keyword], style=style, case_sensitive=False)

    if extension and extension.strip().lstrip("."):
        normalized = ExtensionFilter(extension).extension
        line.highlight_regex(rf"(?i){re.escape(normalized)}$", style=style)

    # Appended after highlighting so the size text is never styled
    line.append(f" {format_bytes(match.size_bytes)}")
    return line

def print_matches(
    matches: Iterable[FileMatch],
    console: Console,
    keyword: Optional[str] = None,
    extension: Optional[str] = None,
    style: Optional[str] = None,
) -> int:
    """Prints one line per match. Returns the number of lines written."""
    count = 0
    for match in matches:
        console.print(render_match(match, keyword, extension, style), soft_wrap=True)
        count += 1
    return count
