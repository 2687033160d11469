"""Streamlit app entrypoint for the Record Dashboard."""

from __future__ import annotations

import logging
import traceback
from typing import Callable, Dict, List, Tuple

import streamlit as st

from record_dashboard.components.cards import render_pokemon_cards, render_team_cards, render_user_cards
from record_dashboard.components.contact_form import render_contact_form
from record_dashboard.components.filters import render_record_filters, reset_record_filters
from record_dashboard.components.navbar import render_navbar
from record_dashboard.components.pagination import render_pagination
from record_dashboard.config import (
    APP_TITLE,
    ASSETS_DIR,
    CACHE_TTL_SECONDS,
    DEFAULT_FILTER,
    DEFAULT_PAGE,
    FILTER_LABELS,
    HOME_POKEMON_LIMIT,
    LOG_LEVEL,
    PAGES,
    TEAM_API_SEED,
    TEAM_SIZE,
)
from record_dashboard.logging_config import configure_logging
from record_dashboard.services import dashboard_service, data_loader, team_service, validation_service
from record_dashboard.services.dashboard_service import DashboardView

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No users available for the current filter or search"
CONTACT_SUCCESS_MESSAGE = "Form submitted successfully!"


def load_css() -> None:
    """Load app-level CSS styling from the assets directory."""
    css_path = ASSETS_DIR / "styles.css"
    if css_path.exists():
        with css_path.open("r", encoding="utf-8") as css_file:
            st.markdown(f"<style>{css_file.read()}</style>", unsafe_allow_html=True)


def init_session_state() -> None:
    """Initialize required session-state variables."""
    st.session_state.setdefault("notifications", [])
    st.session_state.setdefault("dashboard_selection", dashboard_service.DashboardSelection())
    st.session_state.setdefault("contact_form_version", 0)
    st.session_state.setdefault("contact_errors", {})


def queue_notification(level: str, message: str) -> None:
    """Queue a UI notification for display on the next render pass."""
    st.session_state["notifications"].append((level, message))


def show_notifications() -> None:
    """Render queued status messages then clear the queue."""
    notifications: List[Tuple[str, str]] = st.session_state.get("notifications", [])
    if not notifications:
        return

    for level, message in notifications:
        if level == "success":
            st.success(message)
        elif level == "warning":
            st.warning(message)
        else:
            st.info(message)

    st.session_state["notifications"] = []


@st.cache_data(show_spinner=False, ttl=CACHE_TTL_SECONDS)
def get_pokemon(limit: int):
    return data_loader.load_pokemon(limit)


@st.cache_data(show_spinner=False, ttl=CACHE_TTL_SECONDS)
def get_directory_users():
    return data_loader.load_directory_users()


@st.cache_data(show_spinner=False, ttl=CACHE_TTL_SECONDS)
def get_team_members(seed: str, results: int):
    return data_loader.load_team_members(seed, results)


def render_home_page() -> None:
    st.title("Pokémon List")
    try:
        with st.spinner("Loading..."):
            pokemon = get_pokemon(HOME_POKEMON_LIMIT)
    except data_loader.DataLoadError as exc:
        st.error(str(exc))
        return

    render_pokemon_cards(pokemon)


def render_about_page() -> None:
    st.title("About Us")
    try:
        with st.spinner("Loading..."):
            users = get_directory_users()
    except data_loader.DataLoadError as exc:
        st.error(f"Error: {exc}")
        return

    cards_tab, table_tab = st.tabs(["Cards", "Table"])
    with cards_tab:
        render_user_cards(users)
    with table_tab:
        st.dataframe(data_loader.users_frame(users), hide_index=True, width="stretch")


def render_contact_page() -> None:
    """Render the contact form; a valid submission clears it."""
    st.title("Contact Us")
    show_notifications()

    form_key = f"contact_form_{st.session_state['contact_form_version']}"
    submitted, payload = render_contact_form(form_key, st.session_state["contact_errors"])
    if not submitted:
        return

    valid, errors, _ = validation_service.validate_contact_payload(payload)
    st.session_state["contact_errors"] = errors
    if valid:
        logger.info("Contact form submitted")
        st.session_state["contact_form_version"] += 1
        queue_notification("success", CONTACT_SUCCESS_MESSAGE)
    st.rerun()


def _reset_dashboard_filters() -> None:
    reset_record_filters(DEFAULT_FILTER)
    st.session_state["dashboard_selection"] = dashboard_service.reset_selection()


def _render_dashboard_pagination(view: DashboardView, key_prefix: str) -> None:
    requested = render_pagination(
        view.labels,
        view.selection.current_page,
        view.page.total_pages,
        view.navigation,
        key_prefix,
    )
    if requested is not None:
        st.session_state["dashboard_selection"] = dashboard_service.change_page(view.selection, requested)
        st.rerun()


def render_dashboard_page() -> None:
    """Render the searchable, filterable and paginated team grid."""
    st.title("Our Team")
    try:
        with st.spinner("Loading..."):
            members = get_team_members(TEAM_API_SEED, TEAM_SIZE)
    except data_loader.DataLoadError as exc:
        st.error(f"Error: {exc}")
        return

    st.divider()
    query, filter_key = render_record_filters(FILTER_LABELS)
    st.divider()

    selection = dashboard_service.update_selection(st.session_state["dashboard_selection"], query, filter_key)
    view = dashboard_service.build_dashboard_view(
        members,
        selection,
        text_of=team_service.first_name,
        filters=team_service.TEAM_FILTERS,
    )
    st.session_state["dashboard_selection"] = view.selection
    st.caption(f"Total Rows: {view.page.total_records}/{len(members)}")

    _render_dashboard_pagination(view, "top")

    if view.page.page_records:
        render_team_cards(view.page.page_records)
    else:
        st.markdown(f"### {NO_RESULTS_MESSAGE}")
        st.button("Reset Filter", on_click=_reset_dashboard_filters, type="primary")

    _render_dashboard_pagination(view, "bottom")


def _go_home() -> None:
    st.query_params["page"] = DEFAULT_PAGE
    st.session_state.pop("nav_page", None)


def render_not_found_page() -> None:
    st.title("Page not found")
    st.write("The page you are looking for does not exist.")
    st.button("Back to Home", on_click=_go_home)


def render_error_boundary(exc: Exception) -> None:
    """Show a failed page render instead of the page."""
    st.error("Something went wrong")
    with st.expander("Error Details"):
        st.write(str(exc) or type(exc).__name__)
        st.code("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))


PAGE_RENDERERS: Dict[str, Callable[[], None]] = {
    "home": render_home_page,
    "about": render_about_page,
    "contact": render_contact_page,
    "dashboard": render_dashboard_page,
}


def main() -> None:
    """Render and run the Record Dashboard."""
    st.set_page_config(page_title=APP_TITLE, layout="wide")
    configure_logging(getattr(logging, LOG_LEVEL, logging.INFO))
    load_css()
    init_session_state()

    route = st.query_params.get("page", DEFAULT_PAGE)
    if route not in PAGES:
        logger.warning("Unknown route requested: %s", route)
        render_not_found_page()
        return

    selected = render_navbar(APP_TITLE, PAGES, route)
    if selected != route:
        st.query_params["page"] = selected
        route = selected

    try:
        PAGE_RENDERERS[route]()
    except Exception as exc:  # pragma: no cover - streamlit runtime guard
        logger.exception("Rendering page %s failed", route)
        render_error_boundary(exc)


if __name__ == "__main__":
    main()
