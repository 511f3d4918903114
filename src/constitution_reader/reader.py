"""Reading session over one loaded document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from constitution_reader.context import resolve_context
from constitution_reader.favorites import select_favorites
from constitution_reader.flatten import flatten
from constitution_reader.interpretation import InterpretationClient, InterpretationService
from constitution_reader.loader import load_document
from constitution_reader.locator import find_article, find_by_id
from constitution_reader.schemas import (
    Article,
    ConstitutionDocument,
    FilterKind,
    FlatArticle,
    InterpretationResult,
    Node,
    ResolvedContext,
    SearchResult,
    SortKind,
)
from constitution_reader.search import search

logger = logging.getLogger(__name__)


class ConstitutionReader:
    """Search, navigation and interpretation over a read-only document.

    The flat article index is built once on construction and reused by every
    operation; the document must not change afterwards.
    """

    def __init__(
        self,
        document: ConstitutionDocument,
        *,
        interpreter: InterpretationClient | None = None,
    ) -> None:
        self.document = document
        self._index: tuple[FlatArticle, ...] = tuple(flatten(document.titles))
        self._interpretations = InterpretationService(interpreter, self._index)

    @classmethod
    def from_path(
        cls,
        path: Path | str,
        *,
        interpreter: InterpretationClient | None = None,
    ) -> ConstitutionReader:
        return cls(load_document(path), interpreter=interpreter)

    @property
    def index(self) -> tuple[FlatArticle, ...]:
        return self._index

    def search(
        self,
        query: str,
        filter_type: FilterKind = "all",
        sort_order: SortKind = "relevance",
    ) -> list[SearchResult]:
        return search(query, self._index, filter_type, sort_order)

    def resolve_context(self, article: Article) -> ResolvedContext:
        return resolve_context(article, self._index)

    def find_by_id(self, node_id: str) -> Node | None:
        return find_by_id(node_id, self.document.titles)

    def navigate(self, node_id: str) -> Node | None:
        """Return the node to display for ``node_id``.

        Unknown ids fall back to the first title; None only for an empty
        document.
        """
        node = self.find_by_id(node_id)
        if node is not None:
            return node
        logger.warning("Unknown node id %r, showing first title", node_id)
        return self.document.titles[0] if self.document.titles else None

    def find_article(self, number: int | str) -> FlatArticle | None:
        return find_article(number, self._index)

    def favorites(self, numbers: Iterable[int | str]) -> list[FlatArticle]:
        return select_favorites(self._index, numbers)

    def is_interpreting(self, article: Article) -> bool:
        return self._interpretations.is_pending(article)

    async def interpret(self, article: Article) -> InterpretationResult:
        return await self._interpretations.request(article)
