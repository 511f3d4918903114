"""Local configuration for constitution_reader."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_MIN_QUERY_LENGTH = 3
DEFAULT_DOCUMENT_PATH = "constitucion.json"

# GEMINI_API_KEY wins; API_KEY is accepted for deployments that only set the generic name.
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
CONSTITUTION_READER_MODEL = os.getenv("CONSTITUTION_READER_MODEL", DEFAULT_MODEL)
CONSTITUTION_READER_MIN_QUERY_LENGTH = int(
    os.getenv("CONSTITUTION_READER_MIN_QUERY_LENGTH", str(DEFAULT_MIN_QUERY_LENGTH))
)
CONSTITUTION_READER_DOCUMENT_PATH = (
    Path(os.getenv("CONSTITUTION_READER_DOCUMENT_PATH", DEFAULT_DOCUMENT_PATH)).expanduser().resolve()
)
