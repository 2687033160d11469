from __future__ import annotations

from record_dashboard.services.filter_service import apply_filter, search_records
from record_dashboard.services.team_service import (
    TEAM_FILTERS,
    first_name,
    full_name,
    member_age,
)


def _member(first: str, gender: str, age: int):
    return {
        "gender": gender,
        "name": {"title": "Mx", "first": first, "last": "Doe"},
        "dob": {"date": "1990-01-01T00:00:00.000Z", "age": age},
        "login": {"uuid": f"uuid-{first}"},
    }


TEAM = [
    _member("John", "male", 35),
    _member("Jane", "female", 19),
    _member("Bob", "male", 45),
    _member("Ann", "female", 52),
    _member("Tim", "male", 17),
]


def _first_names(members):
    return [first_name(member) for member in members]


def test_accessors():
    member = TEAM[0]
    assert first_name(member) == "John"
    assert full_name(member) == "Mx John Doe"
    assert member_age(member) == 35


def test_accessors_tolerate_missing_fields():
    assert first_name({}) == ""
    assert full_name({}) == ""
    assert member_age({}) == -1


def test_gender_filters():
    assert _first_names(apply_filter(TEAM, "male", TEAM_FILTERS)) == ["John", "Bob", "Tim"]
    assert _first_names(apply_filter(TEAM, "female", TEAM_FILTERS)) == ["Jane", "Ann"]


def test_age_filters():
    assert _first_names(apply_filter(TEAM, "age_under_40", TEAM_FILTERS)) == ["John", "Jane", "Tim"]
    assert _first_names(apply_filter(TEAM, "age_under_20", TEAM_FILTERS)) == ["Jane", "Tim"]
    assert _first_names(apply_filter(TEAM, "age_under_40_male", TEAM_FILTERS)) == ["John", "Tim"]


def test_all_filter_keeps_everyone():
    assert apply_filter(TEAM, "all", TEAM_FILTERS) == TEAM


def test_search_uses_first_name():
    assert _first_names(search_records(TEAM, "jo", first_name)) == ["John"]
    # Last name is not searched.
    assert search_records(TEAM, "doe", first_name) == []
