"""Shared schemas for constitution_reader."""

from constitution_reader.schemas.document import (
    Article,
    Chapter,
    ConstitutionDocument,
    Node,
    Section,
    Title,
)
from constitution_reader.schemas.search import (
    ArticleContext,
    FilterKind,
    FlatArticle,
    InterpretationResult,
    ResolvedContext,
    SearchResult,
    SortKind,
)

__all__ = [
    "Article",
    "ArticleContext",
    "Chapter",
    "ConstitutionDocument",
    "FilterKind",
    "FlatArticle",
    "InterpretationResult",
    "Node",
    "ResolvedContext",
    "SearchResult",
    "Section",
    "SortKind",
    "Title",
]
