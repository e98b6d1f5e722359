"""Pipeline step functions: source loading, tracking, parsing, and both render targets"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from functools import partial
from pathlib import Path

from pydantic import ValidationError

from pressmark.config import Settings
from pressmark.core.export import write_outputs
from pressmark.core.links import add_tracking
from pressmark.core.models import Document, Metadata
from pressmark.core.parse import _strip_frontmatter, contains_callout_marker, parse
from pressmark.render.hypertext import HypertextOptions, render_hypertext
from pressmark.render.layout import PrintDocument
from pressmark.render.printdoc import PrintOptions, render_print


logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS = {'.md', '.mdx', '.txt'}


@dataclass(frozen=True)
class RenderResult:
    document: Document
    print_doc: PrintDocument
    html: str


def discover_files(path: Path) -> list[Path]:
    """Return sorted source files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in SOURCE_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in SOURCE_EXTENSIONS)


def _as_datetime(value):
    """YAML loads bare dates as `date`; promote them to midnight datetimes."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time())
    return value


def load_source(path: Path) -> tuple[Metadata, str]:
    """Read a markup file; its optional YAML frontmatter supplies the Metadata.

    Missing title falls back to the file stem, missing created_at to the file
    modification time. Raises ValueError on bad frontmatter or metadata.
    """
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = _strip_frontmatter(raw)
    fields = dict(frontmatter)
    fields.setdefault("title", path.stem)
    fields["created_at"] = _as_datetime(
        fields.get("created_at") or datetime.fromtimestamp(path.stat().st_mtime)
    )
    try:
        meta = Metadata(**fields)
    except ValidationError as e:
        raise ValueError(f"Invalid metadata in {path}: {e}") from e
    return meta, body


def prepare(text: str, meta: Metadata, settings: Settings) -> Document:
    """Apply link tracking (when enabled) and parse into the canonical Document."""
    if settings.track_links:
        text = add_tracking(text, meta.title, settings.utm_source, settings.utm_medium)
    is_marker = partial(contains_callout_marker, marker=settings.callout_marker)
    return parse(text, is_marker=is_marker)


def run_render(
    text: str,
    meta: Metadata,
    settings: Settings,
    *,
    generated_at: datetime | None = None,
    ) -> RenderResult:
    """Parse once, then project the same Document onto both render targets."""
    doc = prepare(text, meta, settings)
    print_doc = render_print(doc, meta, generated_at=generated_at, options=PrintOptions(
        cover_logo=settings.cover_logo,
        header_logo=settings.header_logo,
        callout_label=settings.callout_label,
        section_break_level=settings.section_break_level,
        hoist_callouts=settings.hoist_callouts,
        inline_preset=settings.inline_preset,
    ))
    html = render_hypertext(doc, meta, options=HypertextOptions(
        callout_label=settings.callout_label,
        inline_preset=settings.inline_preset,
    ))
    logger.debug("rendered %r: %d block(s)", meta.title, len(doc.blocks))
    return RenderResult(document=doc, print_doc=print_doc, html=html)


def run_export(
    path: str,
    settings: Settings,
    output_dir: Path,
    *,
    generated_at: datetime | None = None,
    ) -> list[tuple[Path, Path]]:
    """Render every source under path and write its artifacts. Returns (source, html_path) pairs."""
    results = []
    for p in discover_files(Path(path)):
        try:
            meta, body = load_source(p)
            result = run_render(body, meta, settings, generated_at=generated_at)
            html_path, _, _ = write_outputs(meta, result.html, result.print_doc, output_dir)
        except Exception as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
        logger.info("rendered %s -> %s", p, html_path)
        results.append((p, html_path))
    return results
