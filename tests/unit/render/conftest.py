"""Shared fixtures for renderer unit tests"""

import pytest


@pytest.fixture(name="sample_doc_text")
def sample_doc_text_fixture():
    return (
        "# Title\n\n"
        "TL;DR\n- first\n- second\n\n"
        "## Body\n"
        "See [site](https://example.com) for more.\n"
        "> quoted\n"
    )
