"""Little search engine: keyword index with ranked two-keyword search."""

from .errors import InputUnavailableError
from .posting import Occurrence, KeywordIndex, insert_last_occurrence
from .engine import SearchEngine, load_keywords
from .search import top5_merge
from .tokenizer import get_keyword, iter_document_tokens, load_noise_words
from .index_builder import build_index_from_files
