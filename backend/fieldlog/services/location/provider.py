# backend/fieldlog/services/location/provider.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from fieldlog.context import InlineContext
from fieldlog.models.location import AuthorizationStatus, LocationFix

from .capability import LocationCapability
from .events import AuthChanged, Failed, LocationEvent, LocationUpdated

logger = logging.getLogger(__name__)

Subscriber = Callable[[LocationEvent], None]


class LocationProvider:
    """Holds the latest fix and authorization state; notifies subscribers.

    Capability callbacks may come from any thread. They are posted onto
    ``context`` and only mutate state there. Subscribers are called on the
    same context, after the state change.
    """

    def __init__(self, capability: LocationCapability, context=None):
        self.capability = capability
        self.context = context or InlineContext()
        self.location: Optional[LocationFix] = None
        self.auth_status: AuthorizationStatus = capability.authorization_status()
        self.last_error: Optional[str] = None
        self.updating = False
        self._subscribers: List[Subscriber] = []
        capability.bind(self)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def request_start(self) -> None:
        if self.updating:
            return
        status = self.capability.authorization_status()
        if status is AuthorizationStatus.NOT_DETERMINED:
            logger.info("location permission undetermined, requesting")
            self.capability.request_permission()
        elif status.is_granted:
            self._start_updates()
        else:
            logger.info("location permission %s, not starting updates", status.value)

    def _start_updates(self) -> None:
        if self.updating:
            return
        self.capability.start_updates()
        self.updating = True
        logger.info("location updates started")

    # --- capability delegate (any thread) ---

    def authorization_changed(self, status: AuthorizationStatus) -> None:
        self.context.post(self._apply_authorization, status)

    def fixes_delivered(self, fixes: Sequence[LocationFix]) -> None:
        if not fixes:
            return
        # only the newest fix of a batch matters
        self.context.post(self._apply_fix, fixes[-1])

    def updates_failed(self, message: str) -> None:
        self.context.post(self._apply_failure, message)

    # --- owner context ---

    def _apply_authorization(self, status: AuthorizationStatus) -> None:
        self.auth_status = status
        if status.is_granted:
            self._start_updates()
        else:
            # the platform stops delivering once permission is gone
            self.updating = False
            logger.warning("location permission %s", status.value)
        self._publish(AuthChanged(status))

    def _apply_fix(self, fix: LocationFix) -> None:
        self.location = fix
        self._publish(LocationUpdated(fix))

    def _apply_failure(self, message: str) -> None:
        self.last_error = message
        logger.warning("location update failed: %s", message)
        self._publish(Failed(message))

    def _publish(self, event: LocationEvent) -> None:
        for callback in list(self._subscribers):
            callback(event)
