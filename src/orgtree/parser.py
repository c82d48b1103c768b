"""Parse org-style text into a document tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from orgtree.config import ORGTREE_TODO_KEYWORDS
from orgtree.keywords import resolve_keyword, validate_keywords
from orgtree.matcher import match_headlines
from orgtree.schemas import Document
from orgtree.tree_builder import build_tree

logger = logging.getLogger(__name__)


@dataclass
class ParseOptions:
    """Options for document parsing.

    Attributes:
        todo_keywords: Keywords recognized at the start of a headline title
            when the headline has no explicit keyword and priority. Checked
            in order; the first match wins.
    """

    todo_keywords: list[str] = field(default_factory=lambda: list(ORGTREE_TODO_KEYWORDS))


def parse_document(text: str, options: ParseOptions | None = None) -> Document:
    """Parse ``text`` into a :class:`Document`.

    Any text parses; lines that are not headlines become section text.

    Args:
        text: Full document source.
        options: Parsing options. Uses defaults if None.

    Returns:
        The preamble section and the headline forest.

    Raises:
        ConfigurationError: If the keyword list is invalid.
    """
    opts = options or ParseOptions()
    keywords = validate_keywords(opts.todo_keywords)

    matches = [resolve_keyword(match, keywords) for match in match_headlines(text)]
    tree = build_tree(matches, text)

    logger.debug(
        "Parsed document with %d headlines in %d root trees", len(matches), len(tree.roots)
    )
    return Document(preamble=tree.preamble, roots=tree.roots, source_length=len(text))
