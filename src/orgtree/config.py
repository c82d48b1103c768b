"""Local configuration for orgtree."""

from __future__ import annotations

import os
import re

DEFAULT_TODO_KEYWORDS: tuple[str, ...] = ()

# "|" splits active from done states in org notation ("TODO NEXT | DONE").
_KEYWORD_SEPARATOR_RE = re.compile(r"[\s,|]+")


def parse_keyword_list(raw: str) -> tuple[str, ...]:
    """Split a keyword list such as ``"TODO NEXT | DONE"`` into keywords.

    Order is preserved and repeated keywords are kept only once.
    """
    keywords: list[str] = []
    for token in _KEYWORD_SEPARATOR_RE.split(raw):
        if token and token not in keywords:
            keywords.append(token)
    return tuple(keywords)


ORGTREE_TODO_KEYWORDS = (
    parse_keyword_list(os.getenv("ORGTREE_TODO_KEYWORDS", "")) or DEFAULT_TODO_KEYWORDS
)
