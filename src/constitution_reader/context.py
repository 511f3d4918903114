"""Recover the enclosing title, chapter and section of an article."""

from __future__ import annotations

import logging
from typing import Final, Iterable

from constitution_reader.schemas import Article, ArticleContext, FlatArticle, ResolvedContext

logger = logging.getLogger(__name__)

CONTEXT_NOT_FOUND: Final[str] = "Contexto no encontrado"


def resolve_context(article: Article, index: Iterable[FlatArticle]) -> ResolvedContext:
    """Find the context names of ``article`` in the flat index.

    Articles are compared by value (number and text), so a copy of an article
    resolves the same as the instance held by the tree. When nothing matches,
    a placeholder context is returned instead of raising.
    """
    for entry in index:
        if entry.article.number == article.number and entry.article.text == article.text:
            return describe_context(entry.context)

    logger.warning("No context found for article %s", article.number)
    return ResolvedContext(title_name=CONTEXT_NOT_FOUND, found=False)


def describe_context(context: ArticleContext) -> ResolvedContext:
    """Convert a context chain into its display names."""
    return ResolvedContext(
        title_name=context.title.name,
        chapter_name=context.chapter.name if context.chapter else None,
        section_name=context.section.name if context.section else None,
    )
