"""Test setup for constitution_reader."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from constitution_reader.flatten import flatten  # noqa: E402
from constitution_reader.loader import parse_document  # noqa: E402
from constitution_reader.schemas import ConstitutionDocument, FlatArticle  # noqa: E402

SAMPLE_DOCUMENT = {
    "preambulo": "El pueblo de Venezuela, en ejercicio de sus poderes creadores...",
    "titulos": [
        {
            "id": "t1",
            "nombre": "Título I Principios Fundamentales",
            "articulos": [
                {
                    "numero": 1,
                    "texto": "Venezuela se declara República libre e independiente; "
                    "el Estado venezolano fundamenta su patrimonio moral en la doctrina de Simón Bolívar.",
                },
                {
                    "numero": 2,
                    "texto": "Venezuela se constituye en un Estado democrático y social de Derecho y de Justicia.",
                },
            ],
        },
        {
            "id": "t3",
            "nombre": "Título III De los Derechos Humanos",
            "capitulos": [
                {
                    "id": "t3-c1",
                    "nombre": "Capítulo I Disposiciones Generales",
                    "articulos": [
                        {
                            "numero": 19,
                            "texto": "El Estado garantizará a toda persona el goce y ejercicio "
                            "irrenunciable de los derechos humanos.",
                        },
                        {
                            "numero": 20,
                            "texto": "Toda persona tiene derecho al libre desenvolvimiento de su personalidad.",
                        },
                    ],
                },
                {
                    "id": "t3-c3",
                    "nombre": "Capítulo III De los Derechos Civiles",
                    "articulos": [
                        {"numero": 43, "texto": "El derecho a la vida es inviolable."},
                    ],
                },
            ],
        },
        {
            "id": "t4",
            "nombre": "Título IV Del Poder Público",
            "capitulos": [
                {
                    "id": "t4-c1",
                    "nombre": "Capítulo I De las Disposiciones Fundamentales",
                    "secciones": [
                        {
                            "id": "t4-c1-s1",
                            "nombre": "Sección Primera: Disposiciones Generales",
                            "articulos": [
                                {
                                    "numero": 136,
                                    "texto": "El Poder Público se distribuye entre el Poder Municipal, "
                                    "el Poder Estadal y el Poder Nacional.",
                                },
                            ],
                        },
                        {
                            "id": "t4-c1-s2",
                            "nombre": "Sección Segunda: De la Responsabilidad",
                            "articulos": [
                                {
                                    "numero": 140,
                                    "texto": "El Estado responderá patrimonialmente por los daños "
                                    "que sufran los particulares.",
                                },
                            ],
                        },
                    ],
                },
            ],
        },
        {
            "id": "transitorias",
            "nombre": "Disposiciones Transitorias",
            "articulos": [
                {"numero": "primera", "texto": "La Asamblea Nacional aprobará la legislación sobre la materia."},
                {"numero": "segunda", "texto": "Mientras se dicta la ley, se mantendrá en vigencia la ley anterior."},
            ],
        },
        {
            "id": "final",
            "nombre": "Disposición Final",
            "articulos": [
                {"numero": "única", "texto": "Queda abrogada la Constitución de 1961."},
            ],
        },
    ],
}


@pytest.fixture
def sample_document() -> ConstitutionDocument:
    """A small document covering every nesting level."""
    return parse_document(SAMPLE_DOCUMENT)


@pytest.fixture
def flat_index(sample_document: ConstitutionDocument) -> list[FlatArticle]:
    """Flattened articles of the sample document."""
    return flatten(sample_document.titles)
