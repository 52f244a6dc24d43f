"""Mapping from HR API users to Employee.

Fallbacks when a field is missing:
    name         preferred name, else "given family"
    avatar       avatarImage.url, else avatarUrl, else None
    department   first team, else "-"
    teams        every team name, else []
    office       first location, else "-"
    age          whole years from birthDate to ``today``, else "-"
    supervisor   preferred name, else "given family", else "-"
"""

from datetime import date
from typing import List, Optional, TypeVar, Union

from daily_guess.models.game_models import UNKNOWN, Employee
from daily_guess.models.huma_models import (
    HumaUserDetail,
    HumaUserListItem,
    NamedRef,
    SupervisorRef,
    ValueField,
)

T = TypeVar("T")


def unwrap(field: Optional[ValueField[T]]) -> Optional[T]:
    if field is None:
        return None
    return field.value


def display_name(given_name: str, family_name: str, preferred_name: Optional[str]) -> str:
    if preferred_name:
        return preferred_name
    return f"{given_name} {family_name}".strip()


def first_name_of(refs: List[NamedRef]) -> str:
    if refs and refs[0].name:
        return refs[0].name
    return UNKNOWN


def team_names(teams: List[NamedRef]) -> List[str]:
    names = []
    for team in teams:
        if team.name and team.name not in names:
            names.append(team.name)
    return names


def calculate_age(birth_date: Optional[str], today: date) -> Union[int, str]:
    """Whole years between ``birth_date`` (YYYY-MM-DD) and ``today``."""
    if not birth_date:
        return UNKNOWN
    try:
        birth = date.fromisoformat(birth_date[:10])
    except ValueError:
        return UNKNOWN
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def supervisor_name(supervisor: Optional[SupervisorRef]) -> str:
    if supervisor is None:
        return UNKNOWN
    return display_name(supervisor.givenName, supervisor.familyName, supervisor.preferredName) or UNKNOWN


def map_huma_user_detail(user: HumaUserDetail, today: date) -> Employee:
    given_name = unwrap(user.givenName) or ""
    family_name = unwrap(user.familyName) or ""

    avatar_image = unwrap(user.avatarImage)
    avatar_image_url = (avatar_image.url if avatar_image else None) or unwrap(user.avatarUrl)

    teams = unwrap(user.teams) or []
    locations = unwrap(user.locations) or []

    return Employee(
        id=user.id,
        name=display_name(given_name, family_name, unwrap(user.preferredName)),
        first_name=given_name,
        surname=family_name,
        avatar_image_url=avatar_image_url or None,
        department=first_name_of(teams),
        office=first_name_of(locations),
        teams=team_names(teams),
        age=calculate_age(unwrap(user.birthDate), today),
        supervisor=supervisor_name(unwrap(user.supervisor)),
    )


def map_huma_list_item(user: HumaUserListItem) -> Employee:
    """List items carry neither a birth date nor a supervisor."""
    return Employee(
        id=user.id,
        name=display_name(user.givenName, user.familyName, user.preferredName),
        first_name=user.givenName,
        surname=user.familyName,
        avatar_image_url=user.avatarUrl or None,
        department=first_name_of(user.teams),
        office=first_name_of(user.locations),
        teams=team_names(user.teams),
    )
