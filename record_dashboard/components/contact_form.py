"""Contact form component."""

from __future__ import annotations

from typing import Dict, Tuple

import streamlit as st

from record_dashboard.config import CONTACT_LABELS


def _field_error(errors: Dict[str, str], field: str) -> None:
    if field in errors:
        st.markdown(
            f'<div class="validation-message">{errors[field]}</div>',
            unsafe_allow_html=True,
        )


def render_contact_form(form_key: str, errors: Dict[str, str]) -> Tuple[bool, Dict[str, str]]:
    """Render the contact form and return submit action with payload.

    ``form_key`` changes after a successful submission so every input starts empty.
    """
    with st.form(form_key, clear_on_submit=False):
        first_col, last_col = st.columns(2)
        with first_col:
            first_name = st.text_input(CONTACT_LABELS["first_name"], key=f"{form_key}_first_name")
            _field_error(errors, "first_name")
        with last_col:
            last_name = st.text_input(CONTACT_LABELS["last_name"], key=f"{form_key}_last_name")
            _field_error(errors, "last_name")

        company = st.text_input(CONTACT_LABELS["company"], key=f"{form_key}_company")
        _field_error(errors, "company")

        email = st.text_input(
            CONTACT_LABELS["email"],
            key=f"{form_key}_email",
            placeholder="example@email.com",
        )
        _field_error(errors, "email")

        area_col, phone_col = st.columns([1, 3])
        with area_col:
            area_code = st.text_input(CONTACT_LABELS["area_code"], key=f"{form_key}_area_code", max_chars=3)
            _field_error(errors, "area_code")
        with phone_col:
            phone_number = st.text_input(
                CONTACT_LABELS["phone_number"],
                key=f"{form_key}_phone_number",
                max_chars=8,
            )
            _field_error(errors, "phone_number")

        message = st.text_area(CONTACT_LABELS["message"], key=f"{form_key}_message", height=140)
        _field_error(errors, "message")

        submitted = st.form_submit_button("Submit", type="primary")

    payload = {
        "first_name": first_name,
        "last_name": last_name,
        "company": company,
        "email": email,
        "area_code": area_code,
        "phone_number": phone_number,
        "message": message,
    }
    return submitted, payload
