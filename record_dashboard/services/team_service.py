"""Accessors and named filters for team member records.

Team members are the raw ``randomuser.me`` result dicts; nested fields fall back
to empty values when the API omits them.
"""

from __future__ import annotations

from typing import Any, Dict

from record_dashboard.services.filter_service import RecordPredicate, match_all
from record_dashboard.utils.helpers import normalize_text

TeamMember = Dict[str, Any]


def first_name(user: TeamMember) -> str:
    return normalize_text((user.get("name") or {}).get("first"))


def full_name(user: TeamMember) -> str:
    name = user.get("name") or {}
    parts = [normalize_text(name.get(part)) for part in ("title", "first", "last")]
    return " ".join(part for part in parts if part)


def member_age(user: TeamMember) -> int:
    """Return the reported age, or -1 when the record has none."""
    try:
        return int((user.get("dob") or {}).get("age"))
    except (TypeError, ValueError):
        return -1


def _is_gender(gender: str) -> RecordPredicate:
    def predicate(user: TeamMember) -> bool:
        return normalize_text(user.get("gender")).lower() == gender

    return predicate


def _is_younger_than(age: int) -> RecordPredicate:
    def predicate(user: TeamMember) -> bool:
        return 0 <= member_age(user) < age

    return predicate


_is_male = _is_gender("male")
_is_under_40 = _is_younger_than(40)

TEAM_FILTERS: Dict[str, RecordPredicate] = {
    "all": match_all,
    "male": _is_male,
    "female": _is_gender("female"),
    "age_under_40": _is_under_40,
    "age_under_40_male": lambda user: _is_under_40(user) and _is_male(user),
    "age_under_20": _is_younger_than(20),
}
