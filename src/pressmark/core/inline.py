"""Inline markup resolution shared by both renderers, backed by markdown-it's inline tokenizer"""

from functools import lru_cache
from html import escape
from typing import Annotated, Literal, Union

from markdown_it import MarkdownIt
from markdown_it.token import Token
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_PRESET = "commonmark"

_TEXT_TOKENS = {"text", "text_special"}
_HTML_TAGS = {
    "strong_open": "<strong>", "strong_close": "</strong>",
    "em_open":     "<em>",     "em_close":     "</em>",
    "s_open":      "<s>",      "s_close":      "</s>",
    "link_close":  "</a>",
}


class TextRun(BaseModel):
    """Literal text with inline emphasis already stripped."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["text"] = "text"
    text: str


class LinkRun(BaseModel):
    """A clickable span: display text plus target URL."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["link"] = "link"
    text: str
    href: str


Run = Annotated[Union[TextRun, LinkRun], Field(discriminator="kind")]


@lru_cache(maxsize=None)
def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset; raw HTML is never passed through."""
    return MarkdownIt(preset, options_update={"html": False, "linkify": False})


def tokenize(text: str, preset: str = DEFAULT_PRESET) -> list[Token]:
    """Return the flat inline token stream for a single line of markup."""
    tokens = _make_parser(preset).parseInline(text)
    return (tokens[0].children or []) if tokens else []


def _literal(tok: Token) -> str | None:
    """Plain-channel text contributed by a token, or None for pure markup tokens."""
    if tok.type in _TEXT_TOKENS or tok.type == "code_inline":
        return tok.content
    if tok.type == "image":
        return tok.content              # alt text
    if tok.type == "softbreak":
        return " "
    if tok.type == "hardbreak":
        return "\n"
    return None


def inline_runs(text: str, preset: str = DEFAULT_PRESET) -> list[Run]:
    """Split markup into literal-text and hyperlink runs, preserving reading order.

    Emphasis markers are dropped; adjacent literal text is merged into one run.
    The display text of a link is its label with emphasis stripped.
    """
    runs: list[Run] = []
    link: tuple[str, list[str]] | None = None

    for tok in tokenize(text, preset):
        if tok.type == "link_open":
            link = (str(tok.attrGet("href") or ""), [])
            continue
        if tok.type == "link_close" and link is not None:
            href, parts = link
            runs.append(LinkRun(text="".join(parts), href=href))
            link = None
            continue

        piece = _literal(tok)
        if piece is None:
            continue
        if link is not None:
            link[1].append(piece)
        elif runs and isinstance(runs[-1], TextRun):
            runs[-1] = TextRun(text=runs[-1].text + piece)
        else:
            runs.append(TextRun(text=piece))

    return runs


def plain_text(text: str, preset: str = DEFAULT_PRESET) -> str:
    """Concatenated literal text of a line: `**a** [b](u)` -> `a b`."""
    return "".join(run.text for run in inline_runs(text, preset))


def inline_html(text: str, preset: str = DEFAULT_PRESET) -> str:
    """Convert one line of inline markup to escaped hypertext."""
    out: list[str] = []
    for tok in tokenize(text, preset):
        if tok.type in _TEXT_TOKENS:
            out.append(escape(tok.content, quote=False))
        elif tok.type == "link_open":
            out.append(f'<a href="{escape(str(tok.attrGet("href") or ""))}">')
        elif tok.type == "code_inline":
            out.append(f"<code>{escape(tok.content, quote=False)}</code>")
        elif tok.type == "image":
            src = escape(str(tok.attrGet("src") or ""))
            out.append(f'<img src="{src}" alt="{escape(tok.content)}" />')
        elif tok.type == "softbreak":
            out.append("\n")
        elif tok.type == "hardbreak":
            out.append("<br />\n")
        elif tok.type in _HTML_TAGS:
            out.append(_HTML_TAGS[tok.type])
        else:
            out.append(escape(tok.content, quote=False))
    return "".join(out)
