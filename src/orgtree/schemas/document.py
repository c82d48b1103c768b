"""Document tree models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

Tag = Annotated[str, StringConstraints(pattern=r"^[A-Za-z0-9_@#%]+$")]
Priority = Annotated[str, StringConstraints(min_length=1, max_length=1)]


class ContentKind(str, Enum):
    """Kinds of content a section can hold."""

    BLOCK = "block"
    DRAWER = "drawer"
    DYNAMIC_BLOCK = "dynamic_block"
    FOOTNOTE = "footnote"
    INLINETASK = "inlinetask"
    PLAIN_LIST = "plain_list"
    PROPERTY_DRAWER = "property_drawer"
    TABLE = "table"
    BABEL_CALL = "babel_call"
    PLANNING = "planning"
    PARAGRAPH = "paragraph"


class ContentUnit(BaseModel):
    """An opaque piece of section content produced by a content parser."""

    model_config = ConfigDict(frozen=True)

    kind: ContentKind
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    value: Any = None


class Section(BaseModel):
    """Raw text between a headline line and the next headline line.

    ``contents`` stays empty until a content parser fills it in.
    """

    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    text: str
    contents: list[ContentUnit] = Field(default_factory=list)

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)


class Headline(BaseModel):
    """A headline node with its own section and deeper headlines."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1)
    keyword: str | None = None
    priority: Priority | None = None
    title: str = Field(default="", pattern=r"^[^\n]*$")
    tags: list[Tag] = Field(default_factory=list)
    line_start: int = Field(default=0, ge=0)
    line_end: int = Field(default=0, ge=0)
    section: Section | None = None
    children: list["Headline"] = Field(default_factory=list)


class Document(BaseModel):
    """A parsed document: optional preamble plus the headline forest.

    Parsing and the helpers in ``orgtree.sections`` handle any nesting
    depth. Pydantic equality and ``model_dump`` recurse per level, so very
    deep outlines (around a thousand levels) exceed the interpreter's
    recursion limit there.
    """

    model_config = ConfigDict(frozen=True)

    preamble: Section | None = None
    roots: list[Headline] = Field(default_factory=list)
    source_length: int = Field(default=0, ge=0)
