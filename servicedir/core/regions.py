from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel


class State(BaseModel):
    name: str
    code: str


class Country(BaseModel):
    name: str
    code: str
    states: List[State] = []


COUNTRIES: List[Country] = [
    Country(
        name="Australia",
        code="AU",
        states=[
            State(name="New South Wales", code="NSW"),
            State(name="Victoria", code="VIC"),
            State(name="Queensland", code="QLD"),
            State(name="Western Australia", code="WA"),
            State(name="South Australia", code="SA"),
            State(name="Tasmania", code="TAS"),
            State(name="Australian Capital Territory", code="ACT"),
            State(name="Northern Territory", code="NT"),
        ],
    ),
    Country(
        name="Nepal",
        code="NP",
        states=[
            State(name="Koshi Province", code="KOSHI"),
            State(name="Madhesh Province", code="MADHESH"),
            State(name="Bagmati Province", code="BAGMATI"),
            State(name="Gandaki Province", code="GANDAKI"),
            State(name="Lumbini Province", code="LUMBINI"),
            State(name="Karnali Province", code="KARNALI"),
            State(name="Sudurpashchim Province", code="SUDURPASHCHIM"),
        ],
    ),
]

_BY_CODE: Dict[str, Country] = {c.code: c for c in COUNTRIES}


def get_country(code: Optional[str]) -> Optional[Country]:
    if not code:
        return None
    return _BY_CODE.get(code)


def get_state(country_code: Optional[str], state_code: Optional[str]) -> Optional[State]:
    country = get_country(country_code)
    if not country or not state_code:
        return None
    for s in country.states:
        if s.code == state_code:
            return s
    return None


def is_valid_location(country_code: str, state_code: Optional[str] = None) -> bool:
    country = get_country(country_code)
    if not country:
        return False
    if not state_code:
        return True
    return get_state(country_code, state_code) is not None


def location_name(country_code: Optional[str], state_code: Optional[str] = None) -> Optional[str]:
    """'New South Wales, Australia', 'Australia', or None for unknown codes."""
    country = get_country(country_code)
    if not country:
        return None
    state = get_state(country_code, state_code)
    if state:
        return f"{state.name}, {country.name}"
    return country.name
