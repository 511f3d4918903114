"""Search or outline a constitution JSON file from the command line."""

from __future__ import annotations

import argparse
import asyncio
import logging

from constitution_reader.config import CONSTITUTION_READER_DOCUMENT_PATH
from constitution_reader.exceptions import ConfigurationError
from constitution_reader.interpretation import InterpretationClient
from constitution_reader.output_formatter import format_outline, format_results
from constitution_reader.reader import ConstitutionReader


def main() -> None:
    parser = argparse.ArgumentParser(description="Search articles of a constitution JSON document.")
    parser.add_argument("query", nargs="?", help="Text to search for (at least 3 characters)")
    parser.add_argument("--file", default=str(CONSTITUTION_READER_DOCUMENT_PATH), help="Document JSON path")
    parser.add_argument("--filter", choices=["all", "title", "chapter", "section"], default="all")
    parser.add_argument("--sort", choices=["relevance", "constitutional"], default="relevance")
    parser.add_argument("--interpret", metavar="NUMBER", help="Ask the AI service to explain one article")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    reader = ConstitutionReader.from_path(args.file, interpreter=load_interpreter())

    if args.interpret:
        run_interpretation(reader, args.interpret)
        return

    if not args.query:
        print(format_outline(reader.document))
        return

    results = reader.search(args.query, args.filter, args.sort)
    digest = format_results(args.query, results)
    print(digest.summary)
    print()
    print(digest.content)


def load_interpreter() -> InterpretationClient | None:
    try:
        return InterpretationClient.from_env()
    except ConfigurationError as exc:
        logging.getLogger(__name__).info("AI interpretation disabled: %s", exc)
        return None


def run_interpretation(reader: ConstitutionReader, number: str) -> None:
    entry = reader.find_article(number)
    if entry is None:
        raise SystemExit(f"Article not found: {number}")

    result = asyncio.run(reader.interpret(entry.article))
    print(result.title)
    print()
    print(result.content if result.ok else f"Error: {result.error}")


if __name__ == "__main__":
    main()
