from .capability import LocationCapability, LocationDelegate, PushCapability
from .events import AuthChanged, Failed, LocationEvent, LocationUpdated
from .provider import LocationProvider

__all__ = [
    "LocationCapability",
    "LocationDelegate",
    "PushCapability",
    "AuthChanged",
    "Failed",
    "LocationEvent",
    "LocationUpdated",
    "LocationProvider",
]
