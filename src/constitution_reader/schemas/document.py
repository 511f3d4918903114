"""Document tree models: titles, chapters, sections and articles."""

from __future__ import annotations

from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field


class Article(BaseModel):
    """A numbered (or ordinal-labelled) article.

    ``number`` is an int for ordinary articles and a label such as ``"primera"``
    for transitional and final provisions.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number: int | str = Field(..., alias="numero")
    text: str = Field(..., alias="texto")


class Section(BaseModel):
    """Third-level division; holds articles only."""

    model_config = ConfigDict(populate_by_name=True)

    level: ClassVar[str] = "section"

    id: str
    name: str = Field(..., alias="nombre")
    articles: list[Article] = Field(default_factory=list, alias="articulos")

    def direct_articles(self) -> list[Article]:
        return self.articles

    def children(self) -> list[Section]:
        return []


class Chapter(BaseModel):
    """Second-level division; holds articles, sections, or both."""

    model_config = ConfigDict(populate_by_name=True)

    level: ClassVar[str] = "chapter"

    id: str
    name: str = Field(..., alias="nombre")
    articles: list[Article] = Field(default_factory=list, alias="articulos")
    sections: list[Section] = Field(default_factory=list, alias="secciones")

    def direct_articles(self) -> list[Article]:
        return self.articles

    def children(self) -> list[Section]:
        return self.sections


class Title(BaseModel):
    """Top-level division; holds articles, chapters, or both."""

    model_config = ConfigDict(populate_by_name=True)

    level: ClassVar[str] = "title"

    id: str
    name: str = Field(..., alias="nombre")
    articles: list[Article] = Field(default_factory=list, alias="articulos")
    chapters: list[Chapter] = Field(default_factory=list, alias="capitulos")

    def direct_articles(self) -> list[Article]:
        return self.articles

    def children(self) -> list[Chapter]:
        return self.chapters


Node = Union[Title, Chapter, Section]


class ConstitutionDocument(BaseModel):
    """The whole parsed document."""

    model_config = ConfigDict(populate_by_name=True)

    preamble: str | None = Field(default=None, alias="preambulo")
    titles: list[Title] = Field(default_factory=list, alias="titulos")
