"""
Keyword normalization and whitespace tokenization of documents.

A keyword is a token that, after stripping trailing punctuation, is made of
letters only and is not a noise word. Plain-text and HTML documents are read
from disk and handed to the index as a lazy stream of raw tokens.
"""

import logging
import re
import warnings
from pathlib import Path
from typing import Iterable, Iterator

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk import download as _nltk_download
from nltk.tokenize import WhitespaceTokenizer

from .errors import InputUnavailableError

log = logging.getLogger(__name__)

# Only these are stripped, and only from the end of a token
PUNCTUATION = ".,?:;!"

HTML_SUFFIXES = {".html", ".htm"}
ENCODINGS = ("utf-8", "latin-1", "cp1252")

_LETTERS = re.compile(r"[A-Za-z]+")
_TOKENIZER = WhitespaceTokenizer()


def get_keyword(word: str, noise_words: set[str] | frozenset[str] = frozenset()) -> str | None:
    """
    Return the lower-case keyword for a raw token, or None if it is not one.
    "rain." -> "rain"; "can't", "...", "x2" -> None.
    """
    stripped = word.rstrip(PUNCTUATION)
    if not _LETTERS.fullmatch(stripped):
        return None
    keyword = stripped.lower()
    if keyword in noise_words:
        return None
    return keyword


def tokenize(text: str) -> list[str]:
    """Split text on whitespace. Punctuation stays attached to its token."""
    return _TOKENIZER.tokenize(text)


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_text_file(filepath: Path) -> str:
    """
    Read a text file, trying the common encodings in turn.
    Raises InputUnavailableError if the file is missing or cannot be decoded.
    """
    filepath = Path(filepath)
    for encoding in ENCODINGS:
        try:
            return filepath.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
        except OSError as e:
            raise InputUnavailableError(filepath, e.strerror or str(e)) from e
    raise InputUnavailableError(filepath, "could not be decoded")


def _iter_tokens(text: str) -> Iterator[str]:
    for line in text.splitlines():
        yield from tokenize(line)


def iter_document_tokens(filepath: Path) -> Iterator[str]:
    """
    Return a lazy stream of raw tokens for one document.

    The file is read before this returns, so an unreadable document fails here
    rather than part way through indexing. Call again to restart the stream.
    """
    filepath = Path(filepath)
    content = read_text_file(filepath)
    if filepath.suffix.lower() in HTML_SUFFIXES:
        content = extract_text_from_html(content)
    return _iter_tokens(content)


def load_noise_words(filepath: Path) -> list[str]:
    """Read whitespace separated noise words from a file, as given."""
    words = tokenize(read_text_file(filepath))
    log.debug(f"Loaded {len(words)} noise words from {filepath}")
    return words


def nltk_noise_words(language: str = "english") -> list[str]:
    """Noise words taken from nltk's stopword corpus, downloaded on first use."""
    _nltk_download("stopwords", quiet=True)
    from nltk.corpus import stopwords

    return list(stopwords.words(language))


def keywords_in(tokens: Iterable[str], noise_words: set[str] | frozenset[str] = frozenset()) -> Iterator[str]:
    """Yield the keyword of each token that has one."""
    for token in tokens:
        keyword = get_keyword(token, noise_words)
        if keyword is not None:
            yield keyword
