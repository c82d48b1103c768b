"""TODO keyword resolution for headline titles."""

from __future__ import annotations

import dataclasses
from typing import Iterable

from orgtree.exceptions import ConfigurationError
from orgtree.schemas import HeadlineMatch


def validate_keywords(keywords: Iterable[str]) -> tuple[str, ...]:
    """Check a keyword list and return it as a tuple, order preserved.

    Raises:
        ConfigurationError: If an entry is not a non-empty string without
            whitespace.
    """
    validated: list[str] = []
    for keyword in keywords:
        if not isinstance(keyword, str):
            raise ConfigurationError(f"TODO keywords must be strings, got {keyword!r}")
        if not keyword or any(char.isspace() for char in keyword):
            raise ConfigurationError(
                f"TODO keywords must be non-empty and contain no whitespace, got {keyword!r}"
            )
        validated.append(keyword)
    return tuple(validated)


def resolve_keyword(match: HeadlineMatch, keywords: Iterable[str]) -> HeadlineMatch:
    """Extract a leading TODO keyword from the title when none was explicit.

    The first keyword in ``keywords`` that starts the title as a whole word
    wins. Comparison is case-sensitive.
    """
    if match.keyword is not None:
        return match

    title = match.title
    for keyword in keywords:
        if not title.startswith(keyword):
            continue
        rest = title[len(keyword):]
        if rest and not rest[0].isspace():
            continue
        return dataclasses.replace(match, keyword=keyword, title=rest.lstrip())
    return match
