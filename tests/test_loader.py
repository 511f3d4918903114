"""Tests for document loading and validation."""

from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from constitution_reader.exceptions import DocumentLoadError
from constitution_reader.loader import load_document, parse_document
from constitution_reader.schemas import Article

from conftest import SAMPLE_DOCUMENT


class TestParseDocument:
    """Tests for parse_document function."""

    def test_spanish_keys(self) -> None:
        document = parse_document(SAMPLE_DOCUMENT)

        assert document.preamble is not None
        assert [title.id for title in document.titles] == ["t1", "t3", "t4", "transitorias", "final"]
        assert document.titles[2].chapters[0].sections[1].name == "Sección Segunda: De la Responsabilidad"

    def test_english_keys(self) -> None:
        document = parse_document(
            {"titles": [{"id": "t1", "name": "Title I", "articles": [{"number": 1, "text": "Text."}]}]}
        )

        assert document.preamble is None
        assert document.titles[0].articles[0].text == "Text."

    def test_bare_list_of_titles(self) -> None:
        document = parse_document([{"id": "t1", "nombre": "Título I"}])

        assert len(document.titles) == 1
        assert document.titles[0].articles == []
        assert document.titles[0].chapters == []

    def test_label_numbers_stay_strings(self) -> None:
        document = parse_document(SAMPLE_DOCUMENT)

        assert document.titles[3].articles[0].number == "primera"
        assert document.titles[0].articles[0].number == 1

    def test_rejects_duplicate_ids(self) -> None:
        """Ids are unique across titles, chapters and sections."""
        data = copy.deepcopy(SAMPLE_DOCUMENT)
        data["titulos"][1]["capitulos"][1]["id"] = "t1"

        with pytest.raises(DocumentLoadError, match="Duplicate node ids: t1"):
            parse_document(data)

    def test_rejects_missing_name(self) -> None:
        with pytest.raises(DocumentLoadError, match="Malformed document") as exc_info:
            parse_document({"titulos": [{"id": "t1"}]})

        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_rejects_scalar(self) -> None:
        with pytest.raises(DocumentLoadError, match="Expected an object or a list"):
            parse_document("titulos")


class TestLoadDocument:
    """Tests for load_document function."""

    def test_reads_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "constitucion.json"
        path.write_text(json.dumps(SAMPLE_DOCUMENT, ensure_ascii=False), encoding="utf-8")

        document = load_document(path)

        assert document.titles[0].name == "Título I Principios Fundamentales"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentLoadError, match="not found"):
            load_document(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DocumentLoadError, match="Invalid JSON"):
            load_document(path)


class TestArticleModel:
    """Tests for Article model behaviour."""

    def test_is_immutable(self) -> None:
        article = Article(number=1, text="Texto.")

        with pytest.raises(ValidationError):
            article.text = "Otro."  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        assert Article(number=1, text="Texto.") == Article.model_validate({"numero": 1, "texto": "Texto."})
