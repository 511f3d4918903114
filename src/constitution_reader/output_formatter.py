"""Format the document outline and search results as plain text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from constitution_reader.context import describe_context
from constitution_reader.flatten import count_articles
from constitution_reader.highlight import highlight_matches
from constitution_reader.schemas import ConstitutionDocument, SearchResult


@dataclass
class SearchDigest:
    """Rendered search output."""

    summary: str
    content: str


def format_outline(document: ConstitutionDocument) -> str:
    """Create an indented outline of titles, chapters and sections."""
    lines = ["Outline:"]
    if document.preamble:
        lines.append("Preámbulo")
    lines.extend(_outline_lines(document.titles, indent=0))
    return "\n".join(lines)


def _outline_lines(nodes: Iterable, indent: int) -> list[str]:
    lines: list[str] = []
    for node in nodes:
        total = count_articles([node])
        lines.append(" " * (indent * 4) + f"{node.name} ({total} artículos)")
        lines.extend(_outline_lines(node.children(), indent + 1))
    return lines


def format_results(query: str, results: list[SearchResult], *, highlight: bool = True) -> SearchDigest:
    """Create a summary and one block per search result."""
    summary_lines = [f"Query: {query.strip()}", f"Results: {len(results)}"]
    if results:
        summary_lines.append(f"Top score: {max(result.score for result in results)}")
    summary = "\n".join(summary_lines)

    blocks: list[str] = []
    for result in results:
        text = result.article.text
        if highlight:
            text = highlight_matches(text, query)
        breadcrumb = describe_context(result.context).path
        blocks.append(
            f"## Artículo {result.article.number}\n"
            f"{breadcrumb} · score {result.score}\n\n"
            f"{text}"
        )

    if not blocks:
        blocks.append("No se encontraron resultados.")
    content = "\n\n".join(blocks)
    return SearchDigest(summary=summary, content=content)
