"""Canonical document model: typed blocks, the parsed document, and render metadata"""

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from pressmark.core.inline import plain_text


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Heading(_Frozen):
    """A `#`, `##` or `###` line."""
    kind: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=3)
    text: str


class Paragraph(_Frozen):
    """A plain line of prose. `text` keeps its inline markup; renderers resolve it."""
    kind: Literal["paragraph"] = "paragraph"
    text: str

    @property
    def plain(self) -> str:
        """Text with emphasis markers stripped and links reduced to their labels."""
        return plain_text(self.text)


class Blockquote(_Frozen):
    kind: Literal["blockquote"] = "blockquote"
    text: str


class BulletList(_Frozen):
    """A maximal run of `-`, `*` or `+` items."""
    kind: Literal["list"] = "list"
    items: tuple[str, ...]


class Callout(_Frozen):
    """The TL;DR box: the list run that immediately follows a callout marker line."""
    kind: Literal["callout"] = "callout"
    items: tuple[str, ...]


class CodeBlock(_Frozen):
    """A fenced block, kept verbatim."""
    kind: Literal["code"] = "code"
    text: str
    language: Optional[str] = None


Block = Annotated[
    Union[Heading, Paragraph, Blockquote, BulletList, Callout, CodeBlock],
    Field(discriminator="kind"),
]


class Document(_Frozen):
    """Ordered, immutable block sequence produced once per render request."""
    blocks: tuple[Block, ...] = ()

    def headings(self) -> list[Heading]:
        return [b for b in self.blocks if isinstance(b, Heading)]


class Metadata(BaseModel):
    """Caller-supplied document metadata, used only for decoration."""
    title: str
    summary: Optional[str] = None
    created_at: datetime                     # ISO-8601 on input; validated here, not in renderers
    word_count: Optional[int] = Field(default=None, ge=0)
    content_type: str = "guide"
    status: str = "draft"
    tags: list[str] = []
