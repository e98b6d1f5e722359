"""Frontmatter extraction and the line-oriented markup parser"""

import re
from typing import Any, Callable

import yaml

from pressmark.core.models import (
    Block,
    Blockquote,
    BulletList,
    Callout,
    CodeBlock,
    Document,
    Heading,
    Paragraph,
)


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
LIST_ITEM_RE = re.compile(r'^[-*+]\s+')
FENCE = "```"
CALLOUT_MARKER = "tl;dr"

# Longest prefix first so `### x` is never read as `# ` + `## x`.
HEADING_PREFIXES = (("### ", 3), ("## ", 2), ("# ", 1))


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def contains_callout_marker(line: str, marker: str = CALLOUT_MARKER) -> bool:
    """Case-insensitive substring test on the whole line.

    Unanchored: prose that merely mentions the marker also matches. Swap in
    `starts_with_callout_marker` for the stricter reading.
    """
    return marker.lower() in line.lower()


def starts_with_callout_marker(line: str, marker: str = CALLOUT_MARKER) -> bool:
    """Anchored variant: marker must open the line, optional heading hashes aside."""
    return line.lstrip('#').strip().lower().startswith(marker.lower())


def list_item_text(line: str) -> str | None:
    """Return the item text for a `-`, `*` or `+` line, else None."""
    m = LIST_ITEM_RE.match(line)
    return line[m.end():] if m else None


def _heading(line: str) -> Heading | None:
    for prefix, level in HEADING_PREFIXES:
        if line.startswith(prefix):
            return Heading(level=level, text=line[len(prefix):].strip())
    return None


def _read_fence(lines: list[str], i: int) -> tuple[CodeBlock, int]:
    """Consume a fenced block opening at lines[i]. Returns (block, index after closing fence)."""
    language = lines[i].strip()[len(FENCE):].strip() or None
    body: list[str] = []
    i += 1
    while i < len(lines) and not lines[i].strip().startswith(FENCE):
        body.append(lines[i].rstrip())
        i += 1
    return CodeBlock(text='\n'.join(body), language=language), i + 1


def _read_callout(lines: list[str], i: int) -> tuple[list[str], int]:
    """Collect the list run right after the marker at lines[i]. Returns (items, next index)."""
    items: list[str] = []
    j = i + 1
    while j < len(lines):
        item = list_item_text(lines[j].strip())
        if item is None:
            break
        items.append(item)
        j += 1
    return items, j


def parse(text: str, *, is_marker: Callable[[str], bool] = contains_callout_marker) -> Document:
    """Parse markup into the canonical block sequence. Never fails.

    Single pass with one pending-list buffer, flushed on a blank line or on
    any change of construct. Unrecognised lines become paragraphs. A marker
    line always yields one Callout, empty when no list run follows it.
    """
    lines = text.splitlines()
    blocks: list[Block] = []
    pending: list[str] = []

    def flush() -> None:
        if pending:
            blocks.append(BulletList(items=tuple(pending)))
            pending.clear()

    i = 0
    while i < len(lines):
        line = lines[i].strip()

        if not line:
            flush()
            i += 1
            continue

        if is_marker(line):
            flush()
            items, i = _read_callout(lines, i)
            blocks.append(Callout(items=tuple(items)))
            continue

        if line.startswith(FENCE):
            flush()
            block, i = _read_fence(lines, i)
            blocks.append(block)
            continue

        heading = _heading(line)
        if heading is not None:
            flush()
            blocks.append(heading)
        elif line.startswith('> '):
            flush()
            blocks.append(Blockquote(text=line[2:].strip()))
        elif (item := list_item_text(line)) is not None:
            pending.append(item)
        else:
            flush()
            blocks.append(Paragraph(text=line))
        i += 1

    flush()
    return Document(blocks=tuple(blocks))
