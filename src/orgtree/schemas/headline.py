"""Flat headline records produced by the matcher."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HeadlineMatch:
    """One matched headline line, before it is placed in the tree.

    Attributes:
        level: Number of leading stars.
        keyword: Explicit or resolved TODO keyword, if any.
        priority: Single priority character from a ``[#X]`` cookie.
        title: Title text, stripped and without tags.
        tags: Tags from the trailing ``:a:b:`` block, in order.
        line_start: Offset of the first star in the source text.
        line_end: Offset just past the line terminator (or end of text).
    """

    level: int
    keyword: str | None
    priority: str | None
    title: str
    tags: tuple[str, ...] = field(default_factory=tuple)
    line_start: int = 0
    line_end: int = 0
