"""
Search engine: builds the keyword index from documents and answers
two-keyword OR queries with a ranked top 5.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable

from .posting import KeywordIndex, Occurrence
from .search import top5_merge
from .tokenizer import get_keyword, iter_document_tokens, keywords_in

log = logging.getLogger(__name__)


def load_keywords(
    tokens: Iterable[str],
    doc: str,
    noise_words: set[str] | frozenset[str] = frozenset(),
) -> dict[str, Occurrence]:
    """
    Count the keywords in one document's tokens.
    Returns keyword -> Occurrence(doc, count in this document).
    """
    counts = Counter(keywords_in(tokens, noise_words))
    return {keyword: Occurrence(doc, freq) for keyword, freq in counts.items()}


class SearchEngine:
    """
    Owns one keyword index and its noise words.

    Not thread-safe; callers must serialize access. Repeated make_index calls
    keep merging into the same index, so indexing a document twice records it
    twice.
    """

    def __init__(self) -> None:
        self.keywords_index = KeywordIndex()
        self.noise_words: set[str] = set()

    def get_keyword(self, word: str) -> str | None:
        return get_keyword(word, self.noise_words)

    def load_keywords(self, tokens: Iterable[str], doc: str) -> dict[str, Occurrence]:
        return load_keywords(tokens, doc, self.noise_words)

    def load_keywords_from_document(self, doc_file: Path | str) -> dict[str, Occurrence]:
        """Scan a document file; the document id is the name as given."""
        return self.load_keywords(iter_document_tokens(Path(doc_file)), str(doc_file))

    def merge_keywords(self, kws: dict[str, Occurrence]) -> None:
        self.keywords_index.merge_keywords(kws)

    def make_index(
        self,
        documents: Iterable[tuple[Iterable[str], str]],
        noise_words: Iterable[str],
    ) -> None:
        """
        Index (tokens, doc_id) pairs in order.

        The noise words replace any previous set. If a document's tokens cannot
        be produced the error propagates; documents already merged stay in the
        index.
        """
        self.noise_words = set(noise_words)
        num_docs = 0
        for tokens, doc in documents:
            kws = self.load_keywords(tokens, doc)
            self.merge_keywords(kws)
            num_docs += 1
            log.debug(f"Indexed {doc}: {len(kws)} keywords")
        log.info(f"Indexed {num_docs} documents, {len(self.keywords_index)} keywords")

    def top5search(self, kw1: str, kw2: str) -> list[str] | None:
        """
        Documents containing kw1 or kw2, highest frequency first, at most 5.
        Ties go to kw1. Returns None if neither keyword is indexed.
        """
        return top5_merge(
            self.keywords_index.get_occurrences(kw1),
            self.keywords_index.get_occurrences(kw2),
        )
