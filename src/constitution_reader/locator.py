"""Look up tree nodes and articles by identifier."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from constitution_reader.schemas import FlatArticle, Node

logger = logging.getLogger(__name__)


def find_by_id(node_id: str, nodes: Sequence[Node]) -> Node | None:
    """Return the first node with ``node_id`` in document order, or None.

    Choosing a fallback node is left to the caller.
    """
    for node in nodes:
        if node.id == node_id:
            return node
        found = find_by_id(node_id, node.children())
        if found is not None:
            return found
    return None


def find_article(number: int | str, index: Iterable[FlatArticle]) -> FlatArticle | None:
    """Return the first indexed article whose number matches ``number``.

    Numbers are compared as case-insensitive strings, so ``5`` and ``"5"``
    find the same article and ``"Primera"`` matches ``"primera"``.
    """
    wanted = str(number).strip().lower()
    for entry in index:
        if str(entry.article.number).lower() == wanted:
            return entry
    logger.debug("Article %s not in index", number)
    return None
