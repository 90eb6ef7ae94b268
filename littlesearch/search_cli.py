"""
Interactive search over a keyword index.

Prompts for a document list file and a noise-word file, builds the index,
then prompts for two keywords and prints the top 5 documents containing
either of them. Each round keeps merging into the same index. An empty
answer at any prompt exits.

Usage (from repo root):
    python -m littlesearch.search_cli
    python -m littlesearch.search_cli --docs docs.txt --noise-words noisewords.txt --kw1 deep --kw2 world
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .engine import SearchEngine
from .errors import InputUnavailableError
from .index_builder import build_index_from_files
from .tokenizer import nltk_noise_words


def _prompt(message: str) -> str:
    try:
        return input(f"{message} => ").strip()
    except (EOFError, KeyboardInterrupt):
        print()
        return ""


def format_results(results: Optional[List[str]]) -> str:
    if not results:
        return "No documents matched."
    return "\n".join(f"{rank:2d}. {doc}" for rank, doc in enumerate(results, start=1))


def run_search_loop(engine: SearchEngine | None = None) -> None:
    """
    Interactive command-line loop.
    """
    engine = engine or SearchEngine()
    while True:
        docs_name = _prompt("Enter the name of the 'docs file' or hit enter to exit")
        if not docs_name:
            break
        noise_name = _prompt("Enter the name of the 'noise-words file' or hit enter to exit")
        if not noise_name:
            break

        try:
            build_index_from_files(Path(docs_name), Path(noise_name), engine=engine)
        except InputUnavailableError as e:
            print(f"One of the files could not be found. ({e})")
            return
        print(f"Indexed {len(engine.keywords_index)} keywords.")

        kw1 = _prompt("Enter 'kw1' or hit enter to exit")
        if not kw1:
            break
        kw2 = _prompt("Enter 'kw2' or hit enter to exit")
        if not kw2:
            break

        print(format_results(engine.top5search(kw1.lower(), kw2.lower())))


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Two-keyword OR search over a document list.")
    parser.add_argument(
        "--docs",
        type=Path,
        default=None,
        help="File listing the documents to index. Omit for interactive mode.",
    )
    parser.add_argument(
        "--noise-words",
        type=Path,
        default=None,
        help="File of noise words excluded from the index.",
    )
    parser.add_argument(
        "--nltk-noise-words",
        action="store_true",
        help="Use nltk's English stopwords as noise words.",
    )
    parser.add_argument("--kw1", default=None, help="First keyword (wins ties).")
    parser.add_argument("--kw2", default=None, help="Second keyword.")
    parser.add_argument("--verbose", action="store_true", help="Log indexing progress.")
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.docs is None:
        run_search_loop()
        return

    if args.kw1 is None or args.kw2 is None:
        parser.error("--kw1 and --kw2 are required with --docs")

    noise_words = nltk_noise_words() if args.nltk_noise_words else None
    try:
        engine = build_index_from_files(args.docs, args.noise_words, noise_words=noise_words)
    except InputUnavailableError as e:
        print(f"One of the files could not be found. ({e})")
        sys.exit(1)

    print(format_results(engine.top5search(args.kw1.lower(), args.kw2.lower())))


if __name__ == "__main__":
    main()
