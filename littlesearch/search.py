"""
Ranking for two-keyword OR queries.

Both occurrence lists are in descending frequency order, so the ranking is a
single merge step walking each list from its highest-frequency end.
"""

from typing import Sequence

from .posting import Occurrence

TOP_K = 5


def _documents(occs: Sequence[Occurrence], limit: int) -> list[str]:
    return [o.document for o in occs[:limit]]


def top5_merge(
    occs1: Sequence[Occurrence] | None,
    occs2: Sequence[Occurrence] | None,
    limit: int = TOP_K,
) -> list[str] | None:
    """
    Merge two keywords' occurrence lists into a ranked list of documents.

    The higher frequency is taken first; on a tie the first keyword's
    occurrence wins and only its cursor moves. A document already in the
    result is skipped, but the step still counts toward the limit.

    Returns None when neither list is given. If only one is given, its
    documents are returned in order, truncated to the limit.
    """
    if occs1 is None and occs2 is None:
        return None
    if occs2 is None:
        return _documents(occs1, limit)
    if occs1 is None:
        return _documents(occs2, limit)

    result: list[str] = []
    i = j = steps = 0

    def emit(occ: Occurrence) -> None:
        nonlocal steps
        if occ.document not in result:
            result.append(occ.document)
        steps += 1

    while i < len(occs1) and j < len(occs2) and steps < limit:
        if occs2[j].frequency > occs1[i].frequency:
            emit(occs2[j])
            j += 1
        else:
            emit(occs1[i])
            i += 1

    while i < len(occs1) and steps < limit:
        emit(occs1[i])
        i += 1
    while j < len(occs2) and steps < limit:
        emit(occs2[j])
        j += 1

    return result
