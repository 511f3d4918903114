"""Mark query matches inside article text."""

from __future__ import annotations

import re

from constitution_reader.config import CONSTITUTION_READER_MIN_QUERY_LENGTH


def highlight_matches(
    text: str,
    query: str,
    *,
    marker: str = "**",
    min_length: int = CONSTITUTION_READER_MIN_QUERY_LENGTH,
) -> str:
    """Wrap each case-insensitive occurrence of ``query`` in ``marker``.

    The query is matched literally and the original casing of the text is
    kept. Queries shorter than ``min_length`` leave the text untouched.
    """
    needle = query.strip()
    if len(needle) < min_length:
        return text
    pattern = re.compile(re.escape(needle), re.IGNORECASE)
    return pattern.sub(lambda match: f"{marker}{match.group(0)}{marker}", text)
