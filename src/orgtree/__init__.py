"""orgtree: parse org-style outlines into a headline tree."""

from orgtree.exceptions import ConfigurationError, MatchFailure, OrgtreeError
from orgtree.parser import ParseOptions, parse_document
from orgtree.schemas import ContentKind, ContentUnit, Document, Headline, Section
from orgtree.sections import (
    count_headlines,
    filter_headlines,
    iter_headlines,
    iter_sections,
    populate_sections,
)

__all__ = [
    "ConfigurationError",
    "ContentKind",
    "ContentUnit",
    "Document",
    "Headline",
    "MatchFailure",
    "OrgtreeError",
    "ParseOptions",
    "Section",
    "count_headlines",
    "filter_headlines",
    "iter_headlines",
    "iter_sections",
    "parse_document",
    "populate_sections",
]
