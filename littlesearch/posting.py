"""
Occurrence and keyword index data structures.

An occurrence records how often a keyword appears in one document.
Each keyword's occurrences are kept in descending order of frequency; new
occurrences are appended and moved into place with a binary search.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Mapping

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Occurrence:
    """
    A keyword's occurrence in a document.
    - document: document identifier (file name as given by the caller)
    - frequency: number of times the keyword appears in that document
    """

    document: str
    frequency: int

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"


def insert_last_occurrence(occs: list[Occurrence]) -> list[int]:
    """
    Move the last occurrence in occs to its place in descending frequency order.

    occs[:-1] must already be in descending order. The insertion point is found
    by binary search over that prefix. On an exact frequency match the new
    occurrence goes at the matched index, ahead of the matched element.

    Returns the mid-point indexes probed by the search. This is only for
    checking the search; placement does not depend on it. With a single
    element before insertion there is no search and the trace is empty.
    """
    probes: list[int] = []
    if len(occs) < 2:
        return probes

    new = occs[-1]
    if len(occs) == 2:
        if new.frequency > occs[0].frequency:
            occs[0], occs[1] = new, occs[0]
        return probes

    lo, hi = 0, len(occs) - 2
    point = None
    while lo <= hi:
        mid = (lo + hi) // 2
        probes.append(mid)
        if occs[mid].frequency == new.frequency:
            point = mid
            break
        if occs[mid].frequency > new.frequency:
            lo = mid + 1
        else:
            hi = mid - 1
    if point is None:
        point = lo

    for i in range(len(occs) - 1, point, -1):
        occs[i] = occs[i - 1]
    occs[point] = new
    return probes


class KeywordIndex:
    """
    Keyword index: map from keyword -> occurrences in descending frequency.
    Keywords are only ever added; occurrence lists only ever grow.
    """

    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}

    def add_occurrence(self, keyword: str, occurrence: Occurrence) -> list[int]:
        """Place one occurrence in the keyword's list. Returns the search probes."""
        occs = self._index.get(keyword)
        if occs is None:
            self._index[keyword] = [occurrence]
            return []
        occs.append(occurrence)
        return insert_last_occurrence(occs)

    def merge_keywords(self, kws: Mapping[str, Occurrence]) -> None:
        """Merge one document's keyword occurrences into the index."""
        for keyword, occurrence in kws.items():
            self.add_occurrence(keyword, occurrence)
        log.debug(f"Merged {len(kws)} keywords, index now has {len(self._index)}")

    def get_occurrences(self, keyword: str) -> list[Occurrence] | None:
        """Return the occurrences of a keyword, or None if it is not indexed."""
        return self._index.get(keyword)

    def keywords(self) -> Iterator[str]:
        """Iterate over all keywords in the index."""
        return iter(self._index)

    def total_occurrences(self) -> int:
        return sum(len(occs) for occs in self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self._index

    def __str__(self) -> str:
        return "\n".join(
            f"{keyword}: [{', '.join(str(o) for o in occs)}]"
            for keyword, occs in self._index.items()
        )

    def to_dict(self) -> dict:
        """Plain dict form for display."""
        return {
            keyword: [[o.document, o.frequency] for o in occs]
            for keyword, occs in self._index.items()
        }
