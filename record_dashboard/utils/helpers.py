"""Helper utilities for text normalization, date parsing and display formatting."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pandas as pd
from dateutil import parser as date_parser

from record_dashboard.config import DATE_FORMAT

FEET_PER_METRE = 3.28084


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value).strip()


def parse_date(value: object) -> Optional[date]:
    """Parse ISO-8601 timestamps (as returned by the demo APIs) into dates."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    raw_value = normalize_text(value)
    if not raw_value:
        return None

    try:
        return date_parser.isoparse(raw_value).date()
    except ValueError:
        return None


def format_date(value: object) -> str:
    parsed = parse_date(value)
    return parsed.strftime(DATE_FORMAT) if parsed is not None else ""


def format_height_feet(decimetres: object) -> str:
    """PokeAPI heights are in decimetres."""
    try:
        return f"{float(decimetres) / 10 * FEET_PER_METRE:.1f} feet"
    except (TypeError, ValueError):
        return ""


def format_weight_kg(hectograms: object) -> str:
    """PokeAPI weights are in hectograms."""
    try:
        return f"{float(hectograms) / 10:.1f} kg"
    except (TypeError, ValueError):
        return ""


def format_pokedex_number(pokemon_id: object) -> str:
    return f"#{normalize_text(pokemon_id).zfill(3)}"


def name_initial(name: object) -> str:
    text = normalize_text(name)
    return text[:1].upper()
