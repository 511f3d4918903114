"""Flatten the document tree into searchable (article, context) pairs."""

from __future__ import annotations

from typing import Iterable

from constitution_reader.schemas import ArticleContext, FlatArticle, Title


def flatten(titles: Iterable[Title]) -> list[FlatArticle]:
    """Walk the tree once in document order.

    A container's direct articles come before those of its children, so the
    output follows the printed order of the text.
    """
    flat: list[FlatArticle] = []
    for title in titles:
        title_context = ArticleContext(title=title)
        flat.extend(FlatArticle(article=a, context=title_context) for a in title.direct_articles())

        for chapter in title.children():
            chapter_context = ArticleContext(title=title, chapter=chapter)
            flat.extend(
                FlatArticle(article=a, context=chapter_context) for a in chapter.direct_articles()
            )

            for section in chapter.children():
                section_context = ArticleContext(title=title, chapter=chapter, section=section)
                flat.extend(
                    FlatArticle(article=a, context=section_context)
                    for a in section.direct_articles()
                )
    return flat


def count_articles(nodes: Iterable) -> int:
    """Count articles in the tree."""
    total = 0
    for node in nodes:
        total += len(node.direct_articles())
        total += count_articles(node.children())
    return total
