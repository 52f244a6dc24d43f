"""Closed shapes of the HR API responses the catalog is built from.

Unknown fields are ignored; every field the mapper reads is declared here.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ValueField(BaseModel, Generic[T]):
    value: Optional[T] = None
    editable: Optional[bool] = None


class NamedRef(BaseModel):
    id: Optional[str] = None
    name: str


class AvatarImage(BaseModel):
    url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class UserStatus(BaseModel):
    active: bool = True


class SupervisorRef(BaseModel):
    id: Optional[str] = None
    givenName: str = ""
    familyName: str = ""
    preferredName: Optional[str] = None


class HumaUserListItem(BaseModel):
    id: str
    givenName: str = ""
    familyName: str = ""
    preferredName: Optional[str] = None
    avatarUrl: Optional[str] = None
    jobTitle: Optional[NamedRef] = None
    teams: List[NamedRef] = []
    locations: List[NamedRef] = []
    status: Optional[UserStatus] = None


class HumaListResponse(BaseModel):
    total: int = 0
    items: List[HumaUserListItem] = []


class HumaUserDetail(BaseModel):
    id: str
    givenName: Optional[ValueField[str]] = None
    familyName: Optional[ValueField[str]] = None
    preferredName: Optional[ValueField[str]] = None
    avatarUrl: Optional[ValueField[str]] = None
    avatarImage: Optional[ValueField[AvatarImage]] = None
    birthDate: Optional[ValueField[str]] = None  # YYYY-MM-DD
    teams: Optional[ValueField[List[NamedRef]]] = None
    locations: Optional[ValueField[List[NamedRef]]] = None
    jobTitle: Optional[ValueField[NamedRef]] = None
    supervisor: Optional[ValueField[SupervisorRef]] = None
