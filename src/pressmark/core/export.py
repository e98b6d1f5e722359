"""Export artifacts: CMS draft-post payload, markdown export, and output files"""

import json
from pathlib import Path

from pressmark.core.models import Metadata
from pressmark.core.utils.slug import slugify
from pressmark.render.layout import PrintDocument
from pressmark.render.printdoc import format_date


def build_post_payload(meta: Metadata, html: str, categories: list[str] | None = None) -> dict:
    """Build the draft-post body submitted verbatim to the publishing API.

    Optional fields (excerpt, word_count) are omitted rather than sent as null.
    The HTTP call and its callback wiring live outside this package.
    """
    payload = {
        "title": meta.title,
        "slug": slugify(meta.title),
        "status": "draft",
        "comment_status": "closed",
        "categories": categories or ["Blog"],
        "tags": list(meta.tags),
        "content": html,
        "content_type": meta.content_type,
        "metadata": {"created_at": meta.created_at.isoformat()},
    }
    if meta.summary:
        payload["excerpt"] = meta.summary
    if meta.word_count:
        payload["word_count"] = meta.word_count
    return payload


def build_markdown_export(meta: Metadata, text: str) -> str:
    """Markdown download of a content item: title, status line, then summary, content and tags."""
    parts = [f"# {meta.title}\n\n"]
    parts.append(
        f"**Status:** {meta.status} | **Type:** {meta.content_type} | "
        f"**Created:** {format_date(meta.created_at)}\n"
    )
    if meta.word_count:
        parts.append(f"**Word Count:** {meta.word_count} words\n")
    parts.append("\n")

    if meta.summary:
        parts.append(f"## Summary\n\n{meta.summary}\n\n")
    if text.strip():
        parts.append(f"## Content\n\n{text.strip()}\n\n")
    if meta.tags:
        parts.append("## Tags\n\n" + "".join(f"- {tag}\n" for tag in meta.tags) + "\n")
    return "".join(parts)


def write_outputs(
    meta: Metadata,
    html: str,
    print_doc: PrintDocument,
    output_dir: Path,
    ) -> tuple[Path, Path, Path]:
    """Write `<slug>.html`, `<slug>.print.json` and `<slug>.post.json` to output_dir.

    Returns (html_path, print_path, post_path).
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    slug = slugify(meta.title) or "document"

    html_path = output_dir / f"{slug}.html"
    print_path = output_dir / f"{slug}.print.json"
    post_path = output_dir / f"{slug}.post.json"

    html_path.write_text(html, encoding='utf-8')
    print_path.write_text(print_doc.model_dump_json(indent=2), encoding='utf-8')
    post_path.write_text(
        json.dumps(build_post_payload(meta, html), indent=2, ensure_ascii=False),
        encoding='utf-8',
    )
    return html_path, print_path, post_path
