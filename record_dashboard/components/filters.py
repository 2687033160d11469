"""Search and filter controls for the team dashboard."""

from __future__ import annotations

from typing import Dict, Tuple

import streamlit as st

QUERY_KEY = "dashboard_query"
FILTER_KEY = "dashboard_filter"


def render_record_filters(filter_labels: Dict[str, str]) -> Tuple[str, str]:
    """Render the search box and filter select and return (query, filter_key)."""
    search_col, filter_col = st.columns([3, 2])

    with search_col:
        query = st.text_input(
            "Search",
            key=QUERY_KEY,
            placeholder="Search",
            label_visibility="collapsed",
        )
    with filter_col:
        filter_key = st.selectbox(
            "Filter",
            options=list(filter_labels),
            format_func=lambda key: filter_labels.get(key, key),
            key=FILTER_KEY,
            label_visibility="collapsed",
        )

    return query, filter_key


def reset_record_filters(default_filter: str) -> None:
    """Clear the search box and filter select; use as a button ``on_click`` callback."""
    st.session_state[QUERY_KEY] = ""
    st.session_state[FILTER_KEY] = default_filter
