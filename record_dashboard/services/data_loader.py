"""Data loading services for the dashboard pages."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd
import requests

from record_dashboard.config import (
    DIRECTORY_API_URL,
    HOME_POKEMON_LIMIT,
    POKEMON_API_URL,
    REQUEST_TIMEOUT_SECONDS,
    TEAM_API_PAGE,
    TEAM_API_SEED,
    TEAM_API_URL,
    TEAM_SIZE,
)

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch Data"
POKEMON_DETAILS_ERROR_MESSAGE = "Failed to fetch Pokémon details"
DIRECTORY_ERROR_MESSAGE = "Something went wrong while fetching data"

POKEMON_FIELDS = ["id", "name", "height", "weight"]
DIRECTORY_FIELDS = ["id", "name", "email", "phone"]


class DataLoadError(RuntimeError):
    """Raised when a remote record set cannot be fetched or decoded."""


def fetch_json(
    url: str,
    session: Optional[requests.Session] = None,
    params: Optional[Mapping[str, Any]] = None,
    error_message: str = FETCH_ERROR_MESSAGE,
) -> Any:
    """GET ``url`` and decode its JSON body, raising DataLoadError on any failure."""
    http = session or requests.Session()
    try:
        response = http.get(url, params=params, timeout=REQUEST_TIMEOUT_SECONDS)
        response.raise_for_status()
        return response.json()
    except requests.RequestException as exc:
        logger.warning("Request to %s failed: %s", url, exc)
        raise DataLoadError(error_message) from exc
    except ValueError as exc:
        logger.warning("Response from %s is not valid JSON", url)
        raise DataLoadError(error_message) from exc


def load_pokemon(
    limit: int = HOME_POKEMON_LIMIT,
    session: Optional[requests.Session] = None,
) -> List[Dict[str, Any]]:
    """Load the first ``limit`` Pokémon with their detail records."""
    http = session or requests.Session()
    listing = fetch_json(POKEMON_API_URL, session=http, params={"limit": limit})
    if not isinstance(listing, dict):
        raise DataLoadError(FETCH_ERROR_MESSAGE)

    pokemon: List[Dict[str, Any]] = []
    for entry in listing.get("results", []):
        detail_url = entry.get("url")
        if not detail_url:
            raise DataLoadError(POKEMON_DETAILS_ERROR_MESSAGE)
        details = fetch_json(detail_url, session=http, error_message=POKEMON_DETAILS_ERROR_MESSAGE)
        pokemon.append({field: details.get(field) for field in POKEMON_FIELDS})

    logger.info("Loaded %d Pokémon", len(pokemon))
    return pokemon


def load_directory_users(session: Optional[requests.Session] = None) -> List[Dict[str, Any]]:
    """Load the directory users shown on the About page."""
    users = fetch_json(DIRECTORY_API_URL, session=session, error_message=DIRECTORY_ERROR_MESSAGE)
    if not isinstance(users, list):
        raise DataLoadError(DIRECTORY_ERROR_MESSAGE)

    logger.info("Loaded %d directory users", len(users))
    return [{field: user.get(field) for field in DIRECTORY_FIELDS} for user in users]


def load_team_members(
    seed: str = TEAM_API_SEED,
    results: int = TEAM_SIZE,
    session: Optional[requests.Session] = None,
) -> List[Dict[str, Any]]:
    """Load the full team record set; paging is done client-side."""
    payload = fetch_json(
        TEAM_API_URL,
        session=session,
        params={"seed": seed, "page": TEAM_API_PAGE, "results": results},
    )
    if not isinstance(payload, dict):
        raise DataLoadError(FETCH_ERROR_MESSAGE)
    members = payload.get("results") or []
    logger.info("Loaded %d team members", len(members))
    return members


def users_frame(users: List[Dict[str, Any]]) -> pd.DataFrame:
    """Tabular view of directory users with a stable column order."""
    dataframe = pd.DataFrame(users, columns=DIRECTORY_FIELDS)
    return dataframe.fillna("").reset_index(drop=True)
