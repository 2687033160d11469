"""Pagination controls component."""

from __future__ import annotations

from typing import List, Optional

import streamlit as st

from record_dashboard.utils.pagination import (
    ELLIPSIS,
    NavigationState,
    PageLabel,
    go_to_page,
    is_page_number,
    next_page,
    previous_page,
)


def render_pagination(
    labels: List[PageLabel],
    current_page: int,
    total_pages: int,
    navigation: NavigationState,
    key_prefix: str,
) -> Optional[int]:
    """Render previous/page/next buttons and return the requested page, if any.

    ``key_prefix`` keeps widget keys unique when the control is rendered twice.
    """
    st.caption(f"Page {current_page} of {total_pages}")

    columns = st.columns(len(labels) + 2)
    requested: Optional[int] = None

    with columns[0]:
        if st.button("‹", key=f"{key_prefix}_previous", disabled=navigation.previous_disabled):
            requested = previous_page(current_page)

    for index, label in enumerate(labels, start=1):
        with columns[index]:
            if is_page_number(label):
                clicked = st.button(
                    str(label),
                    key=f"{key_prefix}_page_{index}",
                    type="primary" if label == current_page else "secondary",
                    disabled=navigation.pages_disabled,
                )
                if clicked:
                    requested = go_to_page(label, current_page)
            elif label == ELLIPSIS:
                st.markdown(ELLIPSIS)
            else:
                # Blank slot keeps the control width stable for short lists.
                st.markdown("&nbsp;", unsafe_allow_html=True)

    with columns[-1]:
        if st.button("›", key=f"{key_prefix}_next", disabled=navigation.next_disabled):
            requested = next_page(current_page, total_pages)

    if requested == current_page:
        return None
    return requested
