"""Render a parsed Document to sanitized hypertext for a CMS draft-post body"""

import logging
import re
from html import escape

from pydantic import BaseModel

from pressmark.core.inline import DEFAULT_PRESET, inline_html
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


logger = logging.getLogger(__name__)

ORDINAL_RE = re.compile(r'^\d+\.\s+')

CALLOUT_BOX_STYLE = (
    "background-color: #8B5CF6; color: white; padding: 20px; border-radius: 8px; "
    "margin: 20px 0; font-family: system-ui, -apple-system, sans-serif;"
)
CALLOUT_TITLE_STYLE = "color: white; margin-top: 0; margin-bottom: 15px; font-weight: bold; font-size: 1.125rem;"
CALLOUT_LIST_STYLE = "margin: 0; padding-left: 20px; color: white; list-style-type: disc;"
CALLOUT_ITEM_STYLE = "color: white; margin-bottom: 8px;"


class HypertextOptions(BaseModel):
    callout_label: str = "TL;DR"
    inline_preset: str = DEFAULT_PRESET


def _list(items: tuple[str, ...], preset: str) -> str:
    """`<ol>` when every item opens with `N. `, otherwise `<ul>`."""
    ordered = all(ORDINAL_RE.match(item) for item in items)
    tag = "ol" if ordered else "ul"
    lis = "".join(
        f"<li>{inline_html(ORDINAL_RE.sub('', item, count=1) if ordered else item, preset)}</li>"
        for item in items
    )
    return f"<{tag}>{lis}</{tag}>"


def _callout(items: tuple[str, ...], options: HypertextOptions) -> str:
    """The styled TL;DR box, built whole so nothing downstream can re-wrap its items."""
    lis = "\n    ".join(
        f'<li style="{CALLOUT_ITEM_STYLE}">{inline_html(item, options.inline_preset)}</li>'
        for item in items
    )
    return (
        f'<div style="{CALLOUT_BOX_STYLE}">\n'
        f'  <h3 style="{CALLOUT_TITLE_STYLE}">{escape(options.callout_label)}</h3>\n'
        f'  <ul style="{CALLOUT_LIST_STYLE}">\n'
        f'    {lis}\n'
        f'  </ul>\n'
        f'</div>'
    )


def render_block(block: Block, options: HypertextOptions) -> str | None:
    """One well-formed fragment per block, or None when the block is not emitted."""
    preset = options.inline_preset
    if isinstance(block, Heading):
        if block.level == 1:
            return None                 # the CMS presents the title itself
        return f"<h{block.level}>{inline_html(block.text, preset)}</h{block.level}>"
    if isinstance(block, Callout):
        return _callout(block.items, options) if block.items else None
    if isinstance(block, BulletList):
        return _list(block.items, preset) if block.items else None
    if isinstance(block, Paragraph):
        return f"<p>{inline_html(block.text, preset)}</p>"
    if isinstance(block, Blockquote):
        return f"<blockquote>{inline_html(block.text, preset)}</blockquote>"
    if isinstance(block, CodeBlock):
        return f"<pre><code>{escape(block.text, quote=False)}</code></pre>"
    raise TypeError(f"Unknown block type: {type(block).__name__}")


def render_hypertext(doc: Document, meta: Metadata, *, options: HypertextOptions | None = None) -> str:
    """Render doc block by block, in order. An empty document yields ``""``.

    meta is accepted so both renderers share a signature; the body never
    repeats the title.
    """
    options = options or HypertextOptions()
    fragments = [f for f in (render_block(b, options) for b in doc.blocks) if f is not None]
    logger.debug("hypertext: %r -> %d fragment(s)", meta.title, len(fragments))
    return "\n\n".join(fragments)
