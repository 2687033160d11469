"""Pagination helpers: page counts, slicing, label windows and navigation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple, Union

ELLIPSIS = "..."
BLANK = ""

PageLabel = Union[int, str]


@dataclass(frozen=True)
class NavigationState:
    """Which pagination controls are disabled for the current page."""

    previous_disabled: bool
    next_disabled: bool
    pages_disabled: bool


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """Compute the total number of pages for the provided page size.

    Zero rows yield zero pages; callers treat 0 and 1 alike when disabling controls.
    """
    return math.ceil(total_rows / page_size)


def clamp_page_number(page_number: int, total_pages: int) -> int:
    """Clamp page number to valid bounds."""
    return min(max(page_number, 1), max(total_pages, 1))


def page_slice(page_number: int, page_size: int) -> Tuple[int, int]:
    """Return start/end row offsets for the selected page."""
    start = (page_number - 1) * page_size
    end = start + page_size
    return start, end


def page_labels(total_pages: int, current_page: int, visible: int = 5) -> List[PageLabel]:
    """Return the page labels to render around ``current_page``.

    Short lists are padded with blank placeholders up to ``visible`` slots so the
    control keeps a constant width. Longer lists always keep the first and last
    page as anchors and collapse the gaps into at most two ellipsis markers.
    """
    if total_pages <= visible:
        labels: List[PageLabel] = list(range(1, total_pages + 1))
        labels.extend([BLANK] * (visible - len(labels)))
        return labels

    if current_page <= 3:
        return [1, 2, 3, 4, ELLIPSIS, total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, ELLIPSIS, total_pages - 3, total_pages - 2, total_pages - 1, total_pages]

    return [1, ELLIPSIS, current_page - 1, current_page, current_page + 1, ELLIPSIS, total_pages]


def is_page_number(label: PageLabel) -> bool:
    """Only numeric labels are clickable."""
    return isinstance(label, int) and not isinstance(label, bool)


def previous_page(current_page: int) -> int:
    return max(1, current_page - 1)


def next_page(current_page: int, total_pages: int) -> int:
    if current_page >= total_pages:
        return current_page
    return current_page + 1


def go_to_page(label: PageLabel, current_page: int) -> int:
    """Jump to a numeric label; blanks and ellipsis leave the page unchanged."""
    if is_page_number(label):
        return int(label)
    return current_page


def navigation_state(current_page: int, total_pages: int, has_records: bool) -> NavigationState:
    """Derive disabled flags for previous/next/page buttons."""
    empty = not has_records or total_pages <= 0
    return NavigationState(
        previous_disabled=empty or current_page <= 1,
        next_disabled=empty or current_page >= total_pages,
        pages_disabled=empty,
    )
