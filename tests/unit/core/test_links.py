"""Unit tests for core/links.py"""

import pytest

from pressmark.core.links import add_tracking, campaign_name, track_url, tracking_params


PARAMS = "utm_source=guide&utm_medium=pdf&utm_campaign=my-guide"


@pytest.mark.parametrize("context,expected", [
    ("My Guide", "my-guide"),
    ("  What's New in 2026?  ", "whats-new-in-2026"),
    ("Tabs\tand   spaces", "tabs-and-spaces"),
    ("", ""),
])
def test_campaign_name(context, expected):
    """campaign_name lowercases, drops punctuation and hyphenates whitespace."""
    assert campaign_name(context) == expected


def test_tracking_params_order():
    """Params are emitted as source, medium, campaign."""
    assert tracking_params("My Guide") == PARAMS


def test_tracking_params_custom_source_medium():
    """Source and medium can be overridden."""
    assert tracking_params("x", source="blog", medium="web") == "utm_source=blog&utm_medium=web&utm_campaign=x"


def test_add_tracking_plain_url():
    """A URL without a query gains `?` + params; the link text is untouched."""
    out = add_tracking("See [site](https://example.com) now.", "My Guide")
    assert out == f"See [site](https://example.com?{PARAMS}) now."


def test_add_tracking_existing_query():
    """A URL with a query gains `&` + params."""
    out = add_tracking("[a](https://example.com/p?id=3)", "My Guide")
    assert out == f"[a](https://example.com/p?id=3&{PARAMS})"


def test_add_tracking_keeps_fragment_last():
    """Params go before the fragment."""
    out = add_tracking("[a](https://example.com/p#top)", "My Guide")
    assert out == f"[a](https://example.com/p?{PARAMS}#top)"


def test_add_tracking_is_idempotent():
    """Already-tracked links pass through unchanged."""
    once = add_tracking("[a](https://example.com)", "My Guide")
    assert add_tracking(once, "My Guide") == once


def test_add_tracking_multiple_links():
    """Every well-formed link on a line is rewritten."""
    out = add_tracking("[a](https://a.io) and [b](https://b.io)", "My Guide")
    assert out == f"[a](https://a.io?{PARAMS}) and [b](https://b.io?{PARAMS})"


@pytest.mark.parametrize("text", [
    "No links here at all.",
    "[empty]()",
    "[spaced](https://example.com/a b)",
    "[unclosed](https://example.com",
    "just [brackets] and (parens)",
    "![logo](https://cdn.example.com/logo.png)",
])
def test_add_tracking_leaves_other_text(text):
    """Non-links, malformed pairs and image targets are never altered."""
    assert add_tracking(text, "My Guide") == text


def test_track_url_empty():
    assert track_url("", PARAMS) == ""


def test_add_tracking_skips_code():
    """Links inside a fenced block or a code span are code samples and stay verbatim."""
    text = "```md\n[a](http://x)\n```\nUse `[b](http://y)` syntax"
    assert add_tracking(text, "T") == text


def test_add_tracking_around_code_span():
    """Links on the same line as a code span are still tracked."""
    out = add_tracking("Type `[b](http://y)` or see [docs](https://d.io)", "My Guide")
    assert out == f"Type `[b](http://y)` or see [docs](https://d.io?{PARAMS})"


def test_add_tracking_resumes_after_fence():
    """Tracking picks up again once the fence closes."""
    out = add_tracking("```\n[a](https://a.io)\n```\n[b](https://b.io)\n", "My Guide")
    assert out == f"```\n[a](https://a.io)\n```\n[b](https://b.io?{PARAMS})\n"


def test_add_tracking_unclosed_fence_runs_to_end():
    text = "  ```\n[a](https://a.io)\n[b](https://b.io)"
    assert add_tracking(text, "My Guide") == text


def test_add_tracking_double_backtick_span():
    text = "Write ``[a](https://a.io) ` tick`` here"
    assert add_tracking(text, "My Guide") == text
