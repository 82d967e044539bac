# backend/fieldlog/services/location/capability.py
from __future__ import annotations

import logging
import threading
from typing import Iterable, Optional, Protocol, Sequence

from fieldlog.models.location import AuthorizationStatus, LocationFix

logger = logging.getLogger(__name__)


class LocationDelegate(Protocol):
    """Receives the three notifications of a location capability, on any thread."""

    def authorization_changed(self, status: AuthorizationStatus) -> None: ...

    def fixes_delivered(self, fixes: Sequence[LocationFix]) -> None: ...

    def updates_failed(self, message: str) -> None: ...


class LocationCapability(Protocol):
    def bind(self, delegate: LocationDelegate) -> None: ...

    def authorization_status(self) -> AuthorizationStatus: ...

    def request_permission(self) -> None: ...

    def start_updates(self) -> None: ...


class PushCapability:
    """Capability fed from outside: a phone client, a GPS daemon bridge, or code.

    There is no real permission prompt, so ``request_permission`` answers
    immediately with ``grant_status`` (or DENIED when ``auto_grant`` is off).
    Fixes pushed before updates are started are dropped.
    """

    def __init__(
        self,
        auto_grant: bool = True,
        grant_status: AuthorizationStatus = AuthorizationStatus.AUTHORIZED_WHEN_IN_USE,
    ):
        self.auto_grant = auto_grant
        self.grant_status = grant_status
        self._status = AuthorizationStatus.NOT_DETERMINED
        self._delegate: Optional[LocationDelegate] = None
        self._updating = False
        self._lock = threading.Lock()

    def bind(self, delegate: LocationDelegate) -> None:
        self._delegate = delegate

    def authorization_status(self) -> AuthorizationStatus:
        return self._status

    @property
    def updating(self) -> bool:
        return self._updating

    def request_permission(self) -> None:
        self.set_authorization(self.grant_status if self.auto_grant else AuthorizationStatus.DENIED)

    def start_updates(self) -> None:
        with self._lock:
            self._updating = True

    # --- inbound pushes ---

    def set_authorization(self, status: AuthorizationStatus) -> None:
        with self._lock:
            self._status = status
            if not status.is_granted:
                self._updating = False
        if self._delegate is not None:
            self._delegate.authorization_changed(status)

    def push_fixes(self, fixes: Iterable[LocationFix]) -> bool:
        batch = list(fixes)
        if not self._updating:
            logger.debug("dropping %d fix(es): updates not started", len(batch))
            return False
        if self._delegate is not None:
            self._delegate.fixes_delivered(batch)
        return True

    def push_failure(self, message: str) -> None:
        if self._delegate is not None:
            self._delegate.updates_failed(message)
