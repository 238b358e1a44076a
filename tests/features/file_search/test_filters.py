import pytest

from filehunter.features.file_search.domain.filters import (
    ExtensionFilter,
    KeywordFilter,
    build_filters,
    matches_any,
)

@pytest.mark.parametrize("name, expected", [
    ("foo.txt", True),
    ("myfoo.txt", True),
    ("FOO.txt", True),
    ("MyFoOBar.md", True),
    ("bar.txt", False),
    # Only the base name counts, never the extension
    ("bar.foo", False),
])
def test_keyword_filter(name, expected):
    assert KeywordFilter("foo").matches(name) is expected

def test_keyword_filter_is_case_insensitive_on_both_sides():
    assert KeywordFilter("FoO").matches("report_foo_2024.pdf")

@pytest.mark.parametrize("name, expected", [
    ("a.txt", True),
    ("a.TXT", True),
    ("a.md", False),
    ("txt", False),
    ("archive.txt.gz", False),
])
def test_extension_filter(name, expected):
    assert ExtensionFilter("txt").matches(name) is expected

@pytest.mark.parametrize("configured", ["txt", ".txt", "TXT", ".TxT", " txt "])
def test_extension_is_normalized(configured):
    ext_filter = ExtensionFilter(configured)
    assert ext_filter.extension == ".txt"
    assert ext_filter.matches("notes.Txt")

def test_build_filters_skips_blank_values():
    assert build_filters() == []
    assert build_filters("", "") == []
    assert build_filters("   ", ".") == []

def test_build_filters_keeps_supplied_values():
    filters = build_filters("foo", "md")
    assert filters == [KeywordFilter("foo"), ExtensionFilter(".md")]

def test_no_filters_matches_everything():
    assert matches_any([], "anything.bin")

def test_filters_are_or_combined():
    """
    Keyword and extension together: either one is enough.
    """
    filters = build_filters(keyword="foo", extension="md")
    assert matches_any(filters, "foo.txt")     # keyword only
    assert matches_any(filters, "readme.md")   # extension only
    assert matches_any(filters, "foo.md")      # both
    assert not matches_any(filters, "bar.txt") # neither

def test_keyword_whitespace_is_stripped():
    """
    Keyword and extension ignore surrounding whitespace alike.
    """
    assert KeywordFilter(" foo ").keyword == "foo"
    assert KeywordFilter(" foo").matches("foo.txt")
    assert build_filters(keyword="  foo\t") == [KeywordFilter("foo")]
