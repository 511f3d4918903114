"""Plain-language interpretation of articles through the Gemini API.

The client is built explicitly and handed to whoever needs it. Every failure
is mapped to a subclass of ``InterpretationError`` carrying a message that can
be shown to the reader as is.

Environment:
  GEMINI_API_KEY (or API_KEY)  API key, read by ``InterpretationClient.from_env``
  CONSTITUTION_READER_MODEL    model name, default gemini-2.5-flash
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import httpx
from google import genai
from google.genai import errors as genai_errors

from constitution_reader.config import CONSTITUTION_READER_MODEL, GEMINI_API_KEY
from constitution_reader.context import resolve_context
from constitution_reader.exceptions import (
    ClientInitError,
    EmptyResponseError,
    InterpretationError,
    InterpretationInProgressError,
    MissingCredentialError,
    ServiceUnavailableError,
)
from constitution_reader.schemas import Article, FlatArticle, InterpretationResult, ResolvedContext

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "La clave API de Gemini no está configurada o no es válida."
CLIENT_INIT_MESSAGE = "No se pudo inicializar el cliente de IA."
UNAVAILABLE_MESSAGE = "No se pudo conectar con el servicio de IA. Por favor, inténtelo más tarde."
EMPTY_RESPONSE_MESSAGE = "La respuesta de la API no contiene texto."

_PROMPT_TEMPLATE = """\
Eres un especialista en derecho constitucional venezolano. Explica el artículo \
de la Constitución de la República Bolivariana de Venezuela (1999) que aparece \
abajo para un ciudadano sin formación jurídica.

Ubicación en la Constitución: {context}

Pautas:
1. Usa un lenguaje sencillo; recurre a ejemplos cuando aclaren la idea.
2. Explica el propósito del artículo según el título y capítulo en que se encuentra.
3. Si el artículo es extenso, recorre sus puntos principales uno a uno.
4. Céntrate en sus efectos prácticos sobre los derechos y deberes de las personas y el papel del Estado.
5. Responde con párrafos breves. Puedes resaltar conceptos con **negritas**, pero no uses encabezados (#).

Artículo {number}: "{text}"
"""


def build_prompt(article: Article, context: ResolvedContext) -> str:
    """Render the prompt sent to the model for one article."""
    return _PROMPT_TEMPLATE.format(
        context=context.path,
        number=article.number,
        text=article.text,
    )


class InterpretationClient:
    """Thin wrapper over ``google.genai.Client`` with typed failures."""

    def __init__(
        self,
        api_key: str | None,
        *,
        model: str = CONSTITUTION_READER_MODEL,
        client: Any | None = None,
    ) -> None:
        """Create the client.

        Args:
            api_key: Gemini API key. Ignored when ``client`` is given.
            model: Model identifier passed to ``generate_content``.
            client: Pre-built SDK client, mainly for tests.

        Raises:
            MissingCredentialError: If no API key is available.
            ClientInitError: If the SDK client cannot be constructed.
        """
        if client is None:
            if not api_key:
                raise MissingCredentialError(MISSING_KEY_MESSAGE)
            try:
                client = genai.Client(api_key=api_key)
            except Exception as exc:
                logger.error("Failed to initialize Gemini client: %s", exc)
                raise ClientInitError(CLIENT_INIT_MESSAGE) from exc
        self._client = client
        self.model = model

    @classmethod
    def from_env(cls) -> InterpretationClient:
        return cls(GEMINI_API_KEY, model=CONSTITUTION_READER_MODEL)

    def interpret(self, article: Article, context: ResolvedContext) -> str:
        """Request an interpretation and return its text.

        Raises:
            ServiceUnavailableError: On API, transport or any other SDK error.
            EmptyResponseError: If the response carries no text.
        """
        prompt = build_prompt(article, context)
        try:
            response = self._client.models.generate_content(model=self.model, contents=prompt)
        except (genai_errors.APIError, httpx.HTTPError) as exc:
            logger.error("Gemini request for article %s failed: %s", article.number, exc)
            raise ServiceUnavailableError(UNAVAILABLE_MESSAGE) from exc
        except Exception as exc:
            logger.exception("Unexpected error from Gemini for article %s", article.number)
            raise ServiceUnavailableError(UNAVAILABLE_MESSAGE) from exc
        return _response_text(response, article)

    async def interpret_async(self, article: Article, context: ResolvedContext) -> str:
        """Async variant of :meth:`interpret` using the SDK's ``aio`` surface."""
        prompt = build_prompt(article, context)
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model, contents=prompt
            )
        except (genai_errors.APIError, httpx.HTTPError) as exc:
            logger.error("Gemini request for article %s failed: %s", article.number, exc)
            raise ServiceUnavailableError(UNAVAILABLE_MESSAGE) from exc
        except Exception as exc:
            logger.exception("Unexpected error from Gemini for article %s", article.number)
            raise ServiceUnavailableError(UNAVAILABLE_MESSAGE) from exc
        return _response_text(response, article)


def _response_text(response: Any, article: Article) -> str:
    text = getattr(response, "text", None)
    if not text:
        logger.error("Gemini returned no text for article %s", article.number)
        raise EmptyResponseError(EMPTY_RESPONSE_MESSAGE)
    return text


class InterpretationService:
    """Runs interpretation requests for a reading session.

    Resolves the article's context from the flat index (best effort), calls
    the client and folds the outcome into an ``InterpretationResult``. A
    second request for an article that is still pending is refused.
    """

    def __init__(self, client: InterpretationClient | None, index: Sequence[FlatArticle]) -> None:
        self._client = client
        self._index = index
        self._pending: set[tuple[str, str]] = set()

    def is_pending(self, article: Article) -> bool:
        return _request_key(article) in self._pending

    async def request(self, article: Article) -> InterpretationResult:
        """Interpret one article.

        Raises:
            InterpretationInProgressError: If the same article is already
                being interpreted.
        """
        key = _request_key(article)
        if key in self._pending:
            raise InterpretationInProgressError(
                f"Interpretation of article {article.number} is already in progress"
            )

        title = f"Interpretación del Artículo {article.number}"
        self._pending.add(key)
        try:
            if self._client is None:
                raise MissingCredentialError(MISSING_KEY_MESSAGE)
            context = resolve_context(article, self._index)
            content = await self._client.interpret_async(article, context)
        except InterpretationError as exc:
            return InterpretationResult(title=title, error=str(exc), error_kind=exc.kind)
        finally:
            self._pending.discard(key)
        return InterpretationResult(title=title, content=content)


def _request_key(article: Article) -> tuple[str, str]:
    return str(article.number), article.text
