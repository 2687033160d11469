"""Card grid components for Pokémon, directory users and team members."""

from __future__ import annotations

from typing import Any, Dict, List

import streamlit as st

from record_dashboard.services import team_service
from record_dashboard.utils.helpers import (
    format_date,
    format_height_feet,
    format_pokedex_number,
    format_weight_kg,
    name_initial,
    normalize_text,
)

GRID_COLUMNS = 3


def _grid(records: List[Dict[str, Any]]):
    """Yield (column, record) pairs laid out row by row."""
    for row_start in range(0, len(records), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS)
        for column, record in zip(columns, records[row_start:row_start + GRID_COLUMNS]):
            yield column, record


def render_pokemon_cards(pokemon: List[Dict[str, Any]]) -> None:
    for column, entry in _grid(pokemon):
        with column, st.container(border=True):
            st.markdown(f"#### {normalize_text(entry.get('name')).capitalize()}")
            st.markdown(f"**Height** &nbsp; {format_height_feet(entry.get('height'))}")
            st.markdown(f"**Weight** &nbsp; {format_weight_kg(entry.get('weight'))}")
            st.caption(format_pokedex_number(entry.get("id")))


def render_user_cards(users: List[Dict[str, Any]]) -> None:
    for column, user in _grid(users):
        with column, st.container(border=True):
            st.markdown(f'<div class="avatar">{name_initial(user.get("name"))}</div>', unsafe_allow_html=True)
            st.markdown(f"#### {normalize_text(user.get('name'))}")
            st.write(normalize_text(user.get("email")))
            st.write(normalize_text(user.get("phone")))


def render_team_cards(members: List[Dict[str, Any]]) -> None:
    """Render one card per team member on the current page."""
    for column, member in _grid(members):
        picture = (member.get("picture") or {}).get("large")
        with column, st.container(border=True):
            if picture:
                st.image(picture, width=128)
            st.markdown(f"#### {team_service.full_name(member)}")
            st.caption(f"Age: {team_service.member_age(member)}")
            st.write(f"✉️ {normalize_text(member.get('email'))}")
            st.write(f"📞 {normalize_text(member.get('phone'))}")
            st.write(f"📱 {normalize_text(member.get('cell'))}")
            joined = format_date((member.get("dob") or {}).get("date"))
            st.caption(f"Joined: {joined} · {normalize_text(member.get('nat'))}")
