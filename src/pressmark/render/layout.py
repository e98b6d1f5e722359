"""Print-document model handed to the downstream layout/pagination engine"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from pressmark.core.inline import Run


PAGE_INDICATOR = "{page_number} / {total_pages}"   # filled in by the layout engine


class Cover(BaseModel):
    title: str
    summary: Optional[str] = None
    date_label: str                 # e.g. "Published: October 19, 2026"
    logo: Optional[str] = None      # asset URL, passed through uninterpreted


class TocEntry(BaseModel):
    text: str
    level: int
    page: int                       # synthetic estimate, see render_print


class TableOfContents(BaseModel):
    title: str = "Table of Contents"
    entries: list[TocEntry] = []


class PageHeader(BaseModel):
    logo: Optional[str] = None
    title: str


class PageFooter(BaseModel):
    generated_on: str               # e.g. "Generated on October 19, 2026"
    page_indicator: str = PAGE_INDICATOR


class HeadingElement(BaseModel):
    kind: Literal["heading"] = "heading"
    level: int
    size: int                       # point size, proportional to level
    text: str


class ParagraphElement(BaseModel):
    kind: Literal["paragraph"] = "paragraph"
    runs: list[Run]
    align: str = "justify"


class QuoteElement(BaseModel):
    kind: Literal["quote"] = "quote"
    runs: list[Run]
    indent: int = 20
    italic: bool = True


class ListElement(BaseModel):
    kind: Literal["list"] = "list"
    bullet: str = "•"
    items: list[list[Run]]


class CalloutElement(BaseModel):
    """Boxed run group with a fixed label header."""
    kind: Literal["callout"] = "callout"
    label: str = "TL;DR"
    bullet: str = "•"
    items: list[list[Run]]


class CodeElement(BaseModel):
    kind: Literal["code"] = "code"
    text: str
    language: Optional[str] = None


Element = Annotated[
    Union[HeadingElement, ParagraphElement, QuoteElement, ListElement, CalloutElement, CodeElement],
    Field(discriminator="kind"),
]


class ContentSection(BaseModel):
    """One logical run of content pages sharing the fixed header and footer."""
    header: PageHeader
    footer: PageFooter
    elements: list[Element] = []


class PrintDocument(BaseModel):
    cover: Cover
    toc: TableOfContents
    sections: list[ContentSection] = []
