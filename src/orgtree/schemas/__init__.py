"""Shared schemas for orgtree."""

from orgtree.schemas.document import (
    ContentKind,
    ContentUnit,
    Document,
    Headline,
    Section,
)
from orgtree.schemas.headline import HeadlineMatch

__all__ = [
    "ContentKind",
    "ContentUnit",
    "Document",
    "Headline",
    "HeadlineMatch",
    "Section",
]
