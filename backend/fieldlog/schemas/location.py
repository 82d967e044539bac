# backend/fieldlog/schemas/location.py
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from fieldlog.models.location import AuthorizationStatus, LocationFix


class FixesIn(BaseModel):
    fixes: List[LocationFix] = Field(default_factory=list)


class AuthorizationIn(BaseModel):
    status: AuthorizationStatus


class FailureIn(BaseModel):
    message: str = Field(..., min_length=1, max_length=500)

    @field_validator("message")
    @classmethod
    def encodable(cls, v):
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("message is not valid UTF-8 text")
        return v


class LocationOut(BaseModel):
    location: Optional[LocationFix] = None
    authorization: AuthorizationStatus
    updating: bool
    last_error: Optional[str] = None
