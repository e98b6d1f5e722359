"""Slug and filename derivation from a document title"""

import re
import unicodedata


def slugify(title: str) -> str:
    """ASCII, lowercase, hyphen-separated post slug: `Café Guide: 2026` -> `cafe-guide-2026`."""
    text = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    text = re.sub(r'[^\w\s-]', '', text.lower())
    return re.sub(r'[\s_-]+', '-', text).strip('-')


def sanitize_filename(title: str) -> str:
    """Collapse every non-alphanumeric run to `_` and lowercase: `My Guide!` -> `my_guide`."""
    text = re.sub(r'[^a-z0-9]+', '_', title, flags=re.IGNORECASE)
    return text.strip('_').lower()


def pdf_filename(title: str) -> str:
    return f"{sanitize_filename(title) or 'document'}.pdf"
