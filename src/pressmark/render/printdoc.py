"""Project a parsed Document onto the print-document model (cover, contents, content sections)"""

import logging
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from pressmark.core.inline import DEFAULT_PRESET, inline_runs, plain_text
from pressmark.core.models import (
    Block,
    Blockquote,
    BulletList,
    Callout,
    CodeBlock,
    Document,
    Heading,
    Metadata,
    Paragraph,
)
from pressmark.render.layout import (
    CalloutElement,
    CodeElement,
    ContentSection,
    Cover,
    Element,
    HeadingElement,
    ListElement,
    PageFooter,
    PageHeader,
    ParagraphElement,
    PrintDocument,
    QuoteElement,
    TableOfContents,
    TocEntry,
)


logger = logging.getLogger(__name__)

# First content page: cover is page 1, the table of contents page 2.
TOC_PAGE_OFFSET = 3
HEADING_SIZES = {1: 20, 2: 16, 3: 14}


class PrintOptions(BaseModel):
    cover_logo:          Optional[str] = None
    header_logo:         Optional[str] = None
    callout_label:       str = "TL;DR"
    section_break_level: int = Field(default=1, ge=0, le=3, description="Headings at or above this level open a new section; 0 = one section")
    hoist_callouts:      bool = Field(default=False, description="Render callouts ahead of all other blocks")
    inline_preset:       str = DEFAULT_PRESET


def format_date(value: datetime) -> str:
    """Long US-style date: `October 19, 2026`."""
    return f"{value:%B} {value.day}, {value.year}"


def build_toc(doc: Document, preset: str = DEFAULT_PRESET) -> TableOfContents:
    """Table of contents from heading blocks only, in document order.

    Page numbers are synthetic: heading index plus TOC_PAGE_OFFSET. They are an
    estimate for the layout engine, not measured page positions.
    """
    return TableOfContents(entries=[
        TocEntry(text=plain_text(h.text, preset), level=h.level, page=idx + TOC_PAGE_OFFSET)
        for idx, h in enumerate(doc.headings())
    ])


def group_sections(blocks: list[Block], break_level: int) -> list[list[Block]]:
    """Split blocks into sections; each heading with level <= break_level starts a new one."""
    sections: list[list[Block]] = [[]]

    for block in blocks:
        if isinstance(block, Heading) and block.level <= break_level and sections[-1]:
            sections.append([])
        sections[-1].append(block)

    return [s for s in sections if s]


def render_block(block: Block, options: PrintOptions) -> Element:
    """Map one block to its layout primitive."""
    preset = options.inline_preset
    if isinstance(block, Heading):
        return HeadingElement(level=block.level, size=HEADING_SIZES[block.level], text=plain_text(block.text, preset))
    if isinstance(block, Paragraph):
        return ParagraphElement(runs=inline_runs(block.text, preset))
    if isinstance(block, Blockquote):
        return QuoteElement(runs=inline_runs(block.text, preset))
    if isinstance(block, BulletList):
        return ListElement(items=[inline_runs(item, preset) for item in block.items])
    if isinstance(block, Callout):
        return CalloutElement(label=options.callout_label, items=[inline_runs(item, preset) for item in block.items])
    if isinstance(block, CodeBlock):
        return CodeElement(text=block.text, language=block.language)
    raise TypeError(f"Unknown block type: {type(block).__name__}")


def render_print(
    doc: Document,
    meta: Metadata,
    *,
    generated_at: datetime | None = None,
    options: PrintOptions | None = None,
    ) -> PrintDocument:
    """Build the print-document model for doc. Never mutates doc.

    An empty document yields a cover, an empty table of contents and no
    content sections.
    """
    options = options or PrintOptions()
    generated_on = f"Generated on {format_date(generated_at or datetime.now())}"

    blocks = list(doc.blocks)
    if options.hoist_callouts:
        blocks = [b for b in blocks if isinstance(b, Callout)] + [b for b in blocks if not isinstance(b, Callout)]

    sections = [
        ContentSection(
            header=PageHeader(logo=options.header_logo, title=meta.title),
            footer=PageFooter(generated_on=generated_on),
            elements=[render_block(b, options) for b in group],
        )
        for group in group_sections(blocks, options.section_break_level)
    ]
    logger.debug("print: %d block(s) -> %d section(s)", len(blocks), len(sections))

    return PrintDocument(
        cover=Cover(
            title=meta.title,
            summary=meta.summary or None,
            date_label=f"Published: {format_date(meta.created_at)}",
            logo=options.cover_logo,
        ),
        toc=build_toc(doc, options.inline_preset),
        sections=sections,
    )
