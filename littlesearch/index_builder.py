"""
Index builder: reads a document list and a noise-word list from disk and
builds the keyword index.

The document list file names one document per whitespace separated entry.
Names are used exactly as written, both to open the file (relative to the
current directory) and as the document id in search results.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator

from .engine import SearchEngine
from .tokenizer import iter_document_tokens, load_noise_words, read_text_file, tokenize

log = logging.getLogger(__name__)


def read_document_list(docs_file: Path) -> list[str]:
    """Return the document names listed in docs_file."""
    return tokenize(read_text_file(Path(docs_file)))


def iter_documents(doc_names: Iterable[str]) -> Iterator[tuple[Iterator[str], str]]:
    """
    Yield (tokens, doc_id) for each document, reading each file only when
    it is reached.
    """
    for name in doc_names:
        yield iter_document_tokens(Path(name)), name


def build_index_from_files(
    docs_file: Path,
    noise_words_file: Path | None = None,
    *,
    noise_words: Iterable[str] | None = None,
    engine: SearchEngine | None = None,
) -> SearchEngine:
    """
    Build (or extend) an engine's index from a document list file.
    Noise words come from noise_words_file, or from noise_words if given.
    Raises InputUnavailableError if any listed file cannot be read; documents
    indexed before the failure stay in the engine.
    """
    if engine is None:
        engine = SearchEngine()
    if noise_words is None:
        noise_words = load_noise_words(noise_words_file) if noise_words_file else []
    doc_names = read_document_list(docs_file)
    log.info(f"Indexing {len(doc_names)} documents listed in {docs_file}")
    engine.make_index(iter_documents(doc_names), noise_words)
    return engine
