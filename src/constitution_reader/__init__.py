"""constitution_reader: search and read a structured constitutional text."""

from constitution_reader.context import describe_context, resolve_context
from constitution_reader.exceptions import (
    ClientInitError,
    ConfigurationError,
    ConstitutionReaderError,
    DocumentLoadError,
    EmptyResponseError,
    InterpretationError,
    InterpretationInProgressError,
    MissingCredentialError,
    ServiceError,
    ServiceUnavailableError,
    TransientServiceError,
)
from constitution_reader.flatten import count_articles, flatten
from constitution_reader.loader import load_document, parse_document
from constitution_reader.locator import find_article, find_by_id
from constitution_reader.reader import ConstitutionReader
from constitution_reader.schemas import (
    Article,
    ArticleContext,
    Chapter,
    ConstitutionDocument,
    FlatArticle,
    ResolvedContext,
    SearchResult,
    Section,
    Title,
)
from constitution_reader.search import article_sort_value, score_article, search

__all__ = [
    "Article",
    "ArticleContext",
    "Chapter",
    "ClientInitError",
    "ConfigurationError",
    "ConstitutionDocument",
    "ConstitutionReader",
    "ConstitutionReaderError",
    "DocumentLoadError",
    "EmptyResponseError",
    "FlatArticle",
    "InterpretationError",
    "InterpretationInProgressError",
    "MissingCredentialError",
    "ResolvedContext",
    "SearchResult",
    "Section",
    "ServiceError",
    "ServiceUnavailableError",
    "Title",
    "TransientServiceError",
    "article_sort_value",
    "count_articles",
    "describe_context",
    "find_article",
    "find_by_id",
    "flatten",
    "load_document",
    "parse_document",
    "resolve_context",
    "score_article",
    "search",
]
