"""Tests for outline and search result formatting."""

from __future__ import annotations

from constitution_reader.output_formatter import format_outline, format_results
from constitution_reader.schemas import ConstitutionDocument, FlatArticle
from constitution_reader.search import search


class TestFormatOutline:
    """Tests for format_outline function."""

    def test_indents_levels_with_counts(self, sample_document: ConstitutionDocument) -> None:
        outline = format_outline(sample_document).splitlines()

        assert outline[0] == "Outline:"
        assert outline[1] == "Preámbulo"
        assert "Título III De los Derechos Humanos (3 artículos)" in outline
        assert "    Capítulo III De los Derechos Civiles (1 artículos)" in outline
        assert "        Sección Segunda: De la Responsabilidad (1 artículos)" in outline

    def test_without_preamble(self) -> None:
        assert format_outline(ConstitutionDocument()) == "Outline:"


class TestFormatResults:
    """Tests for format_results function."""

    def test_summary_and_blocks(self, flat_index: list[FlatArticle]) -> None:
        results = search("estado", flat_index)

        digest = format_results("estado", results)

        assert digest.summary.splitlines() == ["Query: estado", "Results: 4", "Top score: 1"]
        assert "## Artículo 140" in digest.content
        assert "el **Estado** venezolano" in digest.content
        assert "Título IV Del Poder Público / Capítulo I De las Disposiciones Fundamentales" in digest.content

    def test_without_highlight(self, flat_index: list[FlatArticle]) -> None:
        digest = format_results("estado", search("estado", flat_index), highlight=False)

        assert "**" not in digest.content

    def test_no_results(self) -> None:
        digest = format_results("xyz", [])

        assert digest.summary == "Query: xyz\nResults: 0"
        assert digest.content == "No se encontraron resultados."
