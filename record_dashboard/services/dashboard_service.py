"""Page state for the team dashboard.

The dashboard owns the query, the filter key and the current page. Every change
recomputes the whole view from the full record set; a new query or filter
starts again from page 1, and the page is clamped once the page count is known.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, List, Mapping, Sequence

from record_dashboard.config import DASHBOARD_PAGE_SIZE, DEFAULT_FILTER, VISIBLE_PAGE_LABELS
from record_dashboard.services import filter_service
from record_dashboard.services.filter_service import PageResult, RecordPredicate, TextAccessor
from record_dashboard.utils.pagination import (
    NavigationState,
    PageLabel,
    clamp_page_number,
    navigation_state,
    page_labels,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSelection:
    query: str = ""
    filter_key: str = DEFAULT_FILTER
    current_page: int = 1


@dataclass(frozen=True)
class DashboardView:
    selection: DashboardSelection
    page: PageResult
    labels: List[PageLabel]
    navigation: NavigationState


def update_selection(selection: DashboardSelection, query: str, filter_key: str) -> DashboardSelection:
    """Apply new search/filter inputs, resetting to page 1 when they changed."""
    previous = filter_service.filters_signature(selection.query, selection.filter_key)
    current = filter_service.filters_signature(query, filter_key)
    if previous == current:
        return selection
    logger.debug("Dashboard selection changed from %s to %s", previous, current)
    return DashboardSelection(query=query, filter_key=filter_key, current_page=1)


def change_page(selection: DashboardSelection, page: int) -> DashboardSelection:
    return replace(selection, current_page=page)


def reset_selection() -> DashboardSelection:
    return DashboardSelection()


def build_dashboard_view(
    records: Sequence[Any],
    selection: DashboardSelection,
    *,
    text_of: TextAccessor,
    filters: Mapping[str, RecordPredicate],
    page_size: int = DASHBOARD_PAGE_SIZE,
    visible: int = VISIBLE_PAGE_LABELS,
) -> DashboardView:
    """Run the pipeline for ``selection`` and derive labels and control state."""
    page = filter_service.paginate(
        records,
        selection.query,
        selection.filter_key,
        selection.current_page,
        page_size,
        text_of=text_of,
        filters=filters,
    )

    clamped_page = clamp_page_number(selection.current_page, page.total_pages)
    if clamped_page != selection.current_page:
        # Stale page after the result set shrank.
        selection = change_page(selection, clamped_page)
        page = filter_service.paginate(
            records,
            selection.query,
            selection.filter_key,
            clamped_page,
            page_size,
            text_of=text_of,
            filters=filters,
        )

    return DashboardView(
        selection=selection,
        page=page,
        labels=page_labels(page.total_pages, selection.current_page, visible),
        navigation=navigation_state(selection.current_page, page.total_pages, page.total_records > 0),
    )
