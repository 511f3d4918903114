"""Models produced by flattening, searching and context resolution."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from constitution_reader.schemas.document import Article, Chapter, Section, Title

FilterKind = Literal["all", "title", "chapter", "section"]
SortKind = Literal["relevance", "constitutional"]
ContextLevel = Literal["title", "chapter", "section"]


class ArticleContext(BaseModel):
    """Chain of containers enclosing an article, from its title downwards."""

    title: Title
    chapter: Chapter | None = None
    section: Section | None = None

    @property
    def level(self) -> ContextLevel:
        """Structural level of the article's direct parent."""
        if self.section is not None:
            return "section"
        if self.chapter is not None:
            return "chapter"
        return "title"


class FlatArticle(BaseModel):
    """An article paired with its enclosing context."""

    article: Article
    context: ArticleContext


class SearchResult(BaseModel):
    """A matched article with its context and relevance score."""

    article: Article
    context: ArticleContext
    score: int


class ResolvedContext(BaseModel):
    """Container names for an article, used for breadcrumbs and AI prompts.

    Attributes:
        title_name: Name of the enclosing title, or a placeholder when the
            article was not found in the index.
        chapter_name: Name of the enclosing chapter, if any.
        section_name: Name of the enclosing section, if any.
        found: False when ``title_name`` is the placeholder.
    """

    title_name: str
    chapter_name: str | None = None
    section_name: str | None = None
    found: bool = True

    @property
    def path(self) -> str:
        names = [self.title_name, self.chapter_name, self.section_name]
        return " / ".join(name for name in names if name)


class InterpretationResult(BaseModel):
    """Terminal state of one interpretation request."""

    title: str
    content: str | None = None
    error: str | None = None
    error_kind: Literal["configuration", "transient", "error"] | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
