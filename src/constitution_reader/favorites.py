"""Select a caller-supplied set of favourite articles from the index."""

from __future__ import annotations

from typing import Iterable

from constitution_reader.schemas import FlatArticle


def select_favorites(index: Iterable[FlatArticle], numbers: Iterable[int | str]) -> list[FlatArticle]:
    """Return indexed articles whose number is in ``numbers``, in document order.

    Favourites are stored externally as strings, so numbers are compared in
    their string form.
    """
    wanted = {str(number) for number in numbers}
    if not wanted:
        return []
    return [entry for entry in index if str(entry.article.number) in wanted]
