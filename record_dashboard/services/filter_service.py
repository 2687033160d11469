"""Search, filter and pagination pipeline over in-memory record sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Sequence

from record_dashboard.utils.pagination import compute_total_pages, page_slice

RecordPredicate = Callable[[Any], bool]
TextAccessor = Callable[[Any], str]


@dataclass(frozen=True)
class PageResult:
    """One page of the filtered set plus the derived page count."""

    total_pages: int
    total_records: int
    page_records: List[Any] = field(default_factory=list)


def match_all(record: Any) -> bool:
    del record
    return True


def search_records(records: Sequence[Any], query: str, text_of: TextAccessor) -> List[Any]:
    """Keep records whose text attribute contains the query, ignoring case."""
    needle = (query or "").lower()
    if not needle:
        return list(records)
    return [record for record in records if needle in str(text_of(record) or "").lower()]


def apply_filter(
    records: Sequence[Any],
    filter_key: str,
    filters: Mapping[str, RecordPredicate],
) -> List[Any]:
    """Apply the named predicate; unknown keys match every record."""
    predicate = filters.get(filter_key, match_all)
    return [record for record in records if predicate(record)]


def paginate(
    records: Sequence[Any],
    query: str,
    filter_key: str,
    page: int,
    page_size: int,
    *,
    text_of: TextAccessor,
    filters: Mapping[str, RecordPredicate],
) -> PageResult:
    """Search, then filter, then count pages, then slice out ``page``.

    The page is not clamped: an out-of-range page returns an empty slice and the
    caller is expected to clamp against ``total_pages``.
    """
    searched = search_records(records, query, text_of)
    filtered = apply_filter(searched, filter_key, filters)

    start, end = page_slice(page, page_size)
    page_records = filtered[start:end] if start >= 0 else []
    return PageResult(
        total_pages=compute_total_pages(len(filtered), page_size),
        total_records=len(filtered),
        page_records=page_records,
    )


def filters_signature(query: str, filter_key: str) -> tuple:
    """Build a hashable signature used to detect selection changes."""
    return (query or "", filter_key)
