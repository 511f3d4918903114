"""Free-text search, structural filtering and ordering over the flat index."""

from __future__ import annotations

import unicodedata
from typing import Final, Iterable, get_args

from constitution_reader.config import CONSTITUTION_READER_MIN_QUERY_LENGTH
from constitution_reader.schemas import (
    Article,
    ArticleContext,
    FilterKind,
    FlatArticle,
    SearchResult,
    SortKind,
)

ARTICLE_PREFIX: Final[str] = "articulo"
NUMBER_MATCH_BONUS: Final[int] = 10

# Labels used for the preamble and for transitional/final provisions, in reading order.
SPECIAL_ARTICLE_ORDER: Final[dict[str, int]] = {
    "preámbulo": -1,
    "única": 1000,
    "primera": 1001,
    "segunda": 1002,
    "tercera": 1003,
    "cuarta": 1004,
    "quinta": 1005,
    "sexta": 1006,
    "séptima": 1007,
    "octava": 1008,
    "novena": 1009,
    "décima": 1010,
    "decimoprimera": 1011,
    "decimosegunda": 1012,
    "decimotercera": 1013,
    "decimocuarta": 1014,
    "decimoquinta": 1015,
    "decimosexta": 1016,
    "decimoséptima": 1017,
    "decimoctava": 1018,
    "decimonovena": 1019,
    "vigésima": 1020,
    "vigesimoprimera": 1021,
    "vigesimosegunda": 1022,
}
# Must stay above every value in SPECIAL_ARTICLE_ORDER.
UNKNOWN_LABEL_ORDER: Final[int] = 10_000

_FILTER_KINDS: Final[frozenset[str]] = frozenset(get_args(FilterKind))
_SORT_KINDS: Final[frozenset[str]] = frozenset(get_args(SortKind))


def search(
    query: str,
    index: Iterable[FlatArticle],
    filter_type: FilterKind = "all",
    sort_order: SortKind = "relevance",
    *,
    min_length: int = CONSTITUTION_READER_MIN_QUERY_LENGTH,
) -> list[SearchResult]:
    """Find articles containing ``query`` and order them.

    Args:
        query: Free text; matched case-insensitively as a literal substring.
        index: Flattened articles, in document order.
        filter_type: Structural level to keep ("all", "title", "chapter",
            "section").
        sort_order: "relevance" (score descending) or "constitutional"
            (article order).
        min_length: Queries shorter than this after trimming return nothing.

    Returns:
        Matching results. Ties keep document order.

    Raises:
        ValueError: If ``filter_type`` or ``sort_order`` is not recognised.
    """
    if filter_type not in _FILTER_KINDS:
        raise ValueError(f"Unsupported filter type: {filter_type!r}")
    if sort_order not in _SORT_KINDS:
        raise ValueError(f"Unsupported sort order: {sort_order!r}")

    needle = query.strip().lower()
    if len(needle) < min_length:
        return []

    results: list[SearchResult] = []
    for entry in index:
        score = score_article(needle, entry.article)
        if score == 0:
            continue
        results.append(SearchResult(article=entry.article, context=entry.context, score=score))

    results = [result for result in results if matches_filter(result.context, filter_type)]

    if sort_order == "relevance":
        results.sort(key=lambda result: result.score, reverse=True)
    else:
        results.sort(key=lambda result: article_sort_value(result.article.number))
    return results


def score_article(query: str, article: Article) -> int:
    """Score one article against a query; 0 means no match.

    The score is the number of non-overlapping occurrences of the query in
    ``"articulo <number> <text>"``, plus NUMBER_MATCH_BONUS when the query
    also occurs in the ``"articulo <number>"`` heading itself.
    """
    needle = query.strip().lower()
    if not needle:
        return 0

    heading = f"{ARTICLE_PREFIX} {article.number}".lower()
    surface = f"{heading} {article.text.lower()}"
    score = surface.count(needle)
    if score and needle in heading:
        score += NUMBER_MATCH_BONUS
    return score


def matches_filter(context: ArticleContext, filter_type: FilterKind) -> bool:
    """Check whether a context belongs to the requested structural level."""
    if filter_type == "all":
        return True
    return context.level == filter_type


def article_sort_value(number: int | str) -> int:
    """Canonical position of an article number in constitutional order."""
    if isinstance(number, int):
        return number
    label = unicodedata.normalize("NFC", number.strip().lower())
    if label in SPECIAL_ARTICLE_ORDER:
        return SPECIAL_ARTICLE_ORDER[label]
    if label.isdecimal():
        return int(label)
    return UNKNOWN_LABEL_ORDER
