"""Headline traversal, filtering and section population."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, Literal, Protocol, Sequence

from orgtree.schemas import ContentUnit, Headline, Section

if TYPE_CHECKING:
    from orgtree.schemas import Document


class ContentParser(Protocol):
    """Turns the raw text of one section into content units."""

    def __call__(self, text: str, span: tuple[int, int]) -> Sequence[ContentUnit]: ...


def iter_headlines(roots: Iterable[Headline]) -> Iterator[Headline]:
    """Yield headlines in pre-order, which is document order."""
    stack = list(reversed(list(roots)))
    while stack:
        headline = stack.pop()
        yield headline
        stack.extend(reversed(headline.children))


def count_headlines(roots: Iterable[Headline]) -> int:
    """Count total headlines in the forest."""
    return sum(1 for _ in iter_headlines(roots))


def iter_sections(document: Document) -> Iterator[Section]:
    """Yield the preamble and every headline section, in document order."""
    if document.preamble is not None:
        yield document.preamble
    for headline in iter_headlines(document.roots):
        if headline.section is not None:
            yield headline.section


def filter_headlines(
    roots: list[Headline],
    *,
    mode: Literal["include", "exclude"] = "exclude",
    tags: Iterable[str] | None = None,
) -> list[Headline]:
    """Filter headlines by tag using include or exclude mode.

    Include mode keeps tagged headlines with their whole subtree, plus the
    ancestors leading to them. Exclude mode drops tagged headlines and
    their subtree. The input forest is left untouched.
    """
    if mode not in ("include", "exclude"):
        raise ValueError(f"Unknown filter mode: {mode!r}")
    selected_tags = {tag for tag in (tags or []) if tag}
    if not selected_tags:
        return roots

    def _filter(nodes: list[Headline]) -> list[Headline]:
        result: list[Headline] = []
        for node in nodes:
            tagged = not selected_tags.isdisjoint(node.tags)
            if mode == "include":
                if tagged:
                    result.append(node)
                else:
                    children = _filter(node.children)
                    if children:
                        result.append(node.model_copy(update={"children": children}))
            else:
                if tagged:
                    continue
                result.append(node.model_copy(update={"children": _filter(node.children)}))
        return result

    return _filter(list(roots))


def populate_sections(document: Document, content_parser: ContentParser) -> None:
    """Fill every section's contents using ``content_parser``.

    Existing contents are replaced. The parser is handed the raw section
    text and its span in the source.
    """
    for section in iter_sections(document):
        section.contents[:] = content_parser(section.text, section.span)
