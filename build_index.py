"""
Build the keyword index from a document list and print index analytics.

Usage:
    python build_index.py --docs docs.txt --noise-words noisewords.txt

The docs file lists one document file name per line; the noise-words file
lists words that are never indexed.

Output:
  - Analytics table printed to console (documents, keywords, occurrences)
  - With --show, every keyword followed by its (document,frequency) list
"""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from littlesearch.errors import InputUnavailableError
from littlesearch.index_builder import build_index_from_files, read_document_list
from littlesearch.tokenizer import nltk_noise_words


def main() -> None:
    import argparse
    parser = argparse.ArgumentParser(description="Build the keyword index and print analytics")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("docs.txt"),
        help="File listing the documents to index (default: docs.txt)",
    )
    parser.add_argument(
        "--noise-words",
        type=Path,
        default=Path("noisewords.txt"),
        help="File of noise words (default: noisewords.txt)",
    )
    parser.add_argument(
        "--nltk-noise-words",
        action="store_true",
        help="Use nltk's English stopwords instead of the noise-words file",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the full keyword table",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-document progress",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    noise_words = nltk_noise_words() if args.nltk_noise_words else None
    try:
        num_docs = len(read_document_list(args.docs))
        engine = build_index_from_files(args.docs, args.noise_words, noise_words=noise_words)
    except InputUnavailableError as e:
        print(f"One of the files could not be found: {e}")
        sys.exit(1)

    index = engine.keywords_index
    if num_docs == 0:
        print(f"No documents listed in {args.docs}.")
        sys.exit(1)

    if args.show:
        print(index)

    print("\n" + "=" * 50)
    print("KEYWORD INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                      | Value |")
    print("|-----------------------------|-------|")
    print(f"| Number of indexed documents | {num_docs} |")
    print(f"| Number of unique keywords   | {len(index)} |")
    print(f"| Number of occurrences       | {index.total_occurrences()} |")
    print(f"| Number of noise words       | {len(engine.noise_words)} |")
    print()
    print("=" * 50)
    print()


if __name__ == "__main__":
    main()
