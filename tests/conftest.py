"""Root test configuration: shared metadata and timestamps"""

from datetime import datetime

import pytest

from pressmark.core.models import Metadata


GENERATED_AT = datetime(2026, 10, 19, 9, 30)


@pytest.fixture(name="meta")
def meta_fixture():
    return Metadata(
        title="Field Guide to Disinformation",
        summary="How narratives spread and how to spot them.",
        created_at="2026-03-05T12:00:00Z",
        word_count=1200,
        tags=["research", "guides"],
    )


@pytest.fixture(name="generated_at")
def generated_at_fixture():
    return GENERATED_AT
