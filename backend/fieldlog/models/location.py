# backend/fieldlog/models/location.py
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AuthorizationStatus(str, Enum):
    NOT_DETERMINED = "not_determined"
    RESTRICTED = "restricted"
    DENIED = "denied"
    AUTHORIZED_WHEN_IN_USE = "authorized_when_in_use"
    AUTHORIZED_ALWAYS = "authorized_always"

    @property
    def is_granted(self) -> bool:
        return self in (AuthorizationStatus.AUTHORIZED_WHEN_IN_USE, AuthorizationStatus.AUTHORIZED_ALWAYS)


class LocationFix(BaseModel):
    """A single position fix (EPSG:4326)."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    horizontal_accuracy: float = Field(..., ge=0, description="Radius of uncertainty in meters")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
