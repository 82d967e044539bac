"""Domain models for the field logger."""

from .category import ObservationCategory
from .location import AuthorizationStatus, LocationFix
from .record import FieldRecord

__all__ = [
    "ObservationCategory",
    "AuthorizationStatus",
    "LocationFix",
    "FieldRecord",
]
