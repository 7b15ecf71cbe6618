from __future__ import annotations

"""Overlay persisted state documents onto the static state table."""

from typing import Iterable, List, Mapping, Optional

NON_CONTIGUOUS_CODES = frozenset({"AK", "HI"})


def merge_state_record(static: Mapping, persisted: Optional[Mapping] = None) -> dict:
    """Return the merged view of one static record and its persisted document.

    Persisted fields override static ones by key. The document's ``stateCode``
    is dropped so ``code`` from the static table is the only identifier.
    """
    merged = dict(static)
    if persisted:
        merged.update(persisted)
    merged.pop("stateCode", None)
    return merged


def merge_state_records(static_records: Iterable[Mapping], persisted_records: Iterable[Mapping]) -> List[dict]:
    """Merge every static record with the persisted document sharing its code."""
    by_code = {}
    for doc in persisted_records:
        # first match wins, same as a linear search over the collection
        by_code.setdefault(doc.get("stateCode"), doc)
    return [merge_state_record(static, by_code.get(static["code"])) for static in static_records]


def parse_contig(contig: Optional[str]) -> Optional[bool]:
    """Parse the ``contig`` query value; anything but true/false means no filter."""
    if contig is None:
        return None
    value = contig.lower()
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def filter_contiguous(states: List[dict], contig: Optional[str]) -> List[dict]:
    """Keep the lower 48 for contig=true, only Alaska and Hawaii for contig=false."""
    flag = parse_contig(contig)
    if flag is None:
        return states
    return [s for s in states if (s.get("code") in NON_CONTIGUOUS_CODES) != flag]
