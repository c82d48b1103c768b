"""Assemble matched headlines into a nested tree with section spans."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from orgtree.schemas import Headline, HeadlineMatch, Section


@dataclass
class BuiltTree:
    """Headline forest and preamble produced by :func:`build_tree`."""

    roots: list[Headline]
    preamble: Section | None


def build_tree(matches: Sequence[HeadlineMatch], text: str) -> BuiltTree:
    """Nest headlines by level and attach the section text that follows each.

    Each headline becomes the last child of the nearest preceding headline
    with a smaller level, or a new root when there is none.
    """
    first_start = matches[0].line_start if matches else len(text)
    preamble = _make_section(text, 0, first_start)

    roots: list[Headline] = []
    stack: list[tuple[int, Headline]] = []

    for index, match in enumerate(matches):
        section_end = matches[index + 1].line_start if index + 1 < len(matches) else len(text)
        node = Headline(
            level=match.level,
            keyword=match.keyword,
            priority=match.priority,
            title=match.title,
            tags=list(match.tags),
            line_start=match.line_start,
            line_end=match.line_end,
            section=_make_section(text, match.line_end, section_end),
        )

        while stack and stack[-1][0] >= match.level:
            stack.pop()

        if stack:
            stack[-1][1].children.append(node)
        else:
            roots.append(node)

        stack.append((match.level, node))

    return BuiltTree(roots=roots, preamble=preamble)


def _make_section(text: str, start: int, end: int) -> Section | None:
    if start >= end:
        return None
    return Section(start=start, end=end, text=text[start:end])
