# backend/fieldlog/services/location/events.py
from dataclasses import dataclass
from typing import Union

from fieldlog.models.location import AuthorizationStatus, LocationFix


@dataclass(frozen=True)
class LocationUpdated:
    fix: LocationFix


@dataclass(frozen=True)
class AuthChanged:
    status: AuthorizationStatus


@dataclass(frozen=True)
class Failed:
    message: str


LocationEvent = Union[LocationUpdated, AuthChanged, Failed]
