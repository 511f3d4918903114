"""Load the constitution document from JSON into validated models."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from constitution_reader.exceptions import DocumentLoadError
from constitution_reader.schemas import ConstitutionDocument, Title

logger = logging.getLogger(__name__)


def load_document(path: Path | str) -> ConstitutionDocument:
    """Read a JSON document from disk and validate it.

    Args:
        path: Location of the UTF-8 encoded JSON file.

    Returns:
        The validated document.

    Raises:
        DocumentLoadError: If the file is missing, is not valid JSON, or does
            not describe a well-formed tree.
    """
    path = Path(path)
    if not path.is_file():
        raise DocumentLoadError(f"Document file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(f"Invalid JSON in {path}: {exc}") from exc

    document = parse_document(data)
    logger.debug("Loaded %d titles from %s", len(document.titles), path)
    return document


def parse_document(data: Any) -> ConstitutionDocument:
    """Validate already-decoded JSON data.

    Accepts either ``{"preambulo": ..., "titulos": [...]}`` (English keys work
    too) or a bare list of titles.
    """
    if isinstance(data, list):
        data = {"titles": data}
    if not isinstance(data, dict):
        raise DocumentLoadError(
            f"Expected an object or a list of titles, got {type(data).__name__}"
        )

    try:
        document = ConstitutionDocument.model_validate(data)
    except ValidationError as exc:
        raise DocumentLoadError(f"Malformed document: {exc}") from exc

    duplicates = _duplicate_ids(document.titles)
    if duplicates:
        raise DocumentLoadError(f"Duplicate node ids: {', '.join(sorted(duplicates))}")
    return document


def _duplicate_ids(titles: Iterable[Title]) -> set[str]:
    seen: set[str] = set()
    duplicates: set[str] = set()

    def _visit(node) -> None:
        if node.id in seen:
            duplicates.add(node.id)
        seen.add(node.id)
        for child in node.children():
            _visit(child)

    for title in titles:
        _visit(title)
    return duplicates
