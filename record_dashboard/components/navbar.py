"""Top navigation bar component."""

from __future__ import annotations

from typing import Dict

import streamlit as st


def render_navbar(title: str, pages: Dict[str, str], active_page: str) -> str:
    """Render the app header and sidebar navigation; return the selected route."""
    st.markdown(
        f"""
        <div class="navbar">
            <div class="navbar-title">{title}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )

    routes = list(pages)
    selected = st.sidebar.radio(
        "Navigation",
        options=routes,
        index=routes.index(active_page) if active_page in routes else 0,
        format_func=lambda route: pages[route],
        key="nav_page",
    )
    return selected
