"""Match headline lines in org-style documents."""

from __future__ import annotations

import logging
import re
from typing import Iterator

from orgtree.exceptions import MatchFailure
from orgtree.schemas import HeadlineMatch

logger = logging.getLogger(__name__)

# REST holds the title and any trailing tags; _split_tags separates them.
_HEADLINE_PATTERN = r"""
    (?P<stars>\*+)[ \t]                        # STARS
    (?:(?P<keyword>\S+)[ ]                     # KEYWORD
       \[\#(?P<priority>[^\]\n])\][ ])?         # PRIORITY
    (?P<rest>.*)                               # TITLE and TAGS
"""
_TAGS_PATTERN = r":(?:[A-Za-z0-9_@#%]+:)+"

try:
    _HEADLINE_RE = re.compile(_HEADLINE_PATTERN, re.VERBOSE)
    _TAGS_RE = re.compile(_TAGS_PATTERN)
except re.error as exc:  # pragma: no cover - the patterns are constants
    raise MatchFailure(f"Invalid headline grammar: {exc}") from exc


def match_headlines(text: str) -> list[HeadlineMatch]:
    """Return every headline line in ``text``, in document order.

    Lines that do not match the headline grammar are skipped; they belong
    to the surrounding section.
    """
    headlines: list[HeadlineMatch] = []
    for line_start, line, line_end in _iter_lines(text):
        match = _HEADLINE_RE.fullmatch(line)
        if match is None:
            continue
        headlines.append(_to_headline_match(match, line_start, line_end))

    logger.debug("Matched %d headline lines", len(headlines))
    return headlines


def _iter_lines(text: str) -> Iterator[tuple[int, str, int]]:
    """Yield ``(start, line, end)`` for each physical line.

    ``line`` excludes the terminator (``\\n`` or ``\\r\\n``); ``end`` is the
    offset just past it.
    """
    position = 0
    length = len(text)
    while position < length:
        newline = text.find("\n", position)
        if newline == -1:
            line, end = text[position:], length
        else:
            line, end = text[position:newline], newline + 1
        yield position, line.removesuffix("\r"), end
        position = end


def _to_headline_match(match: re.Match[str], line_start: int, line_end: int) -> HeadlineMatch:
    title, tags = _split_tags(match.group("rest"))
    return HeadlineMatch(
        level=len(match.group("stars")),
        keyword=match.group("keyword"),
        priority=match.group("priority"),
        title=title,
        tags=tags,
        line_start=line_start,
        line_end=line_end,
    )


def _split_tags(rest: str) -> tuple[str, tuple[str, ...]]:
    """Split a trailing ``:a:b:`` block off the title.

    The block must be the last whitespace-separated token of the line.
    """
    parts = rest.rstrip().rsplit(None, 1)
    if not parts or not _TAGS_RE.fullmatch(parts[-1]):
        return rest.strip(), ()
    title = parts[0].strip() if len(parts) == 2 else ""
    return title, tuple(parts[-1][1:-1].split(":"))
