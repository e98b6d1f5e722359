"""Unit tests for core/utils/slug.py"""

import pytest

from pressmark.core.utils.slug import pdf_filename, sanitize_filename, slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("my_file_name", "my-file-name"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-chrs"),
    ("", ""),
])
def test_slugify_basic(text, expected):
    """slugify converts text to lowercase hyphenated slug."""
    assert slugify(text) == expected


@pytest.mark.parametrize("title,expected", [
    ("Café Guide: 2026", "cafe-guide-2026"),
    ("Déjà vu", "deja-vu"),
    ("日本語", ""),
])
def test_slugify_folds_to_ascii(title, expected):
    """Accents fold to ASCII; scripts with no ASCII form drop out."""
    assert slugify(title) == expected


def test_slugify_strips_leading_trailing_hyphens():
    """slugify strips leading/trailing hyphens from result."""
    assert not slugify("!leading").startswith("-")


@pytest.mark.parametrize("title,expected", [
    ("Field Guide: 2026 Edition!", "field_guide_2026_edition"),
    ("__already__", "already"),
    ("a---b", "a_b"),
    ("!!!", ""),
])
def test_sanitize_filename(title, expected):
    """sanitize_filename keeps alphanumerics joined by single underscores."""
    assert sanitize_filename(title) == expected


def test_pdf_filename_falls_back_for_empty_title():
    assert pdf_filename("My Guide") == "my_guide.pdf"
    assert pdf_filename("???") == "document.pdf"
