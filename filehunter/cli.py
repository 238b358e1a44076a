import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from filehunter.core.config.settings import settings
from filehunter.features.size_converter.domain.models import SizeThreshold
from filehunter.features.file_search.domain.models import SearchRequest
from filehunter.features.file_search.service.api import finder
from filehunter.features.reporting.service.formatter import print_matches

logger = logging.getLogger(__name__)

# Same status argparse uses for usage errors
EXIT_CONFIG_ERROR = 2


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"size cannot be negative: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filehunter",
        description="Recursively find files larger than a size, optionally filtered by name keyword or extension.",
    )
    parser.add_argument("--dir", dest="root", default=settings.DEFAULT_ROOT,
                        help="Root directory to search (default: %(default)s)")
    parser.add_argument("--size", type=_non_negative_int, default=settings.DEFAULT_SIZE,
                        help="Only report files strictly larger than this (default: %(default)s)")
    parser.add_argument("--unit", default=settings.DEFAULT_UNIT,
                        help="Unit for --size, case-insensitive: KB, MB or GB (default: %(default)s)")
    parser.add_argument("--keyword", default=None,
                        help="Substring to look for in the file name, extension excluded")
    parser.add_argument("--ext", dest="extension", default=None,
                        help="File extension to match, with or without the dot")
    parser.add_argument("--no-follow-symlinks", dest="follow_symlinks", action="store_false",
                        default=settings.FOLLOW_SYMLINKS,
                        help="Do not descend into symlinked directories")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable highlighting of matched keywords and extensions")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def setup_logging(verbose: bool) -> bool:
    """
    Logs go to stderr so stdout only carries results.
    Returns False when the configured level is unknown; WARNING is used instead.
    """
    level = logging.getLevelName("DEBUG" if verbose else settings.LOG_LEVEL)
    valid = isinstance(level, int)
    logging.basicConfig(
        level=level if valid else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    return valid


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if not setup_logging(args.verbose):
        logger.error(f"Configuration error: unknown log level {settings.LOG_LEVEL!r}")
        return EXIT_CONFIG_ERROR

    # 1. Validate configuration before touching the filesystem
    try:
        request = SearchRequest(
            root_path=Path(args.root),
            threshold=SizeThreshold(args.size, args.unit),
            keyword=args.keyword,
            extension=args.extension,
            follow_symlinks=args.follow_symlinks,
        )
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    # 2. Search (filesystem errors are logged by the walker, never fatal)
    summary = finder.search(request)

    # 3. Report
    console = Console(highlight=False, no_color=args.no_color)
    style = "none" if args.no_color else settings.HIGHLIGHT_STYLE
    print_matches(summary.matches, console, args.keyword, args.extension, style)
    return 0


if __name__ == "__main__":
    sys.exit(main())
