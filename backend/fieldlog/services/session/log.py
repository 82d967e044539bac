# backend/fieldlog/services/session/log.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, List, Optional
from uuid import UUID

from fieldlog.errors import RejectReason
from fieldlog.models.category import ObservationCategory
from fieldlog.models.location import LocationFix
from fieldlog.models.record import FieldRecord
from fieldlog.services.export.csv_export import render_csv
from fieldlog.services.export.files import write_export
from fieldlog.services.export.geojson import render_geojson
from fieldlog.services.location.provider import LocationProvider

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def is_input_valid(location: Optional[LocationFix], value: Optional[float], note: Optional[str]) -> bool:
    """Whether the record action should be offered: a known fix and a value or a note."""
    if location is None:
        return False
    return value is not None or not is_blank(note)


class SessionLog:
    """Ordered, category-locked records of one collection session."""

    def __init__(self, provider: LocationProvider, clock: Callable[[], datetime] = _utcnow):
        self.provider = provider
        self.clock = clock
        self._records: List[FieldRecord] = []
        self.last_rejection: Optional[RejectReason] = None

    def __len__(self) -> int:
        return len(self._records)

    def records(self, newest_first: bool = False) -> List[FieldRecord]:
        rows = list(self._records)
        if newest_first:
            rows.reverse()
        return rows

    def is_locked(self) -> bool:
        return bool(self._records)

    def locked_category(self) -> Optional[ObservationCategory]:
        return self._records[0].category if self._records else None

    def append(self, category: ObservationCategory, value: Optional[float] = None, note: Optional[str] = None) -> bool:
        fix = self.provider.location
        if fix is None:
            return self._reject(RejectReason.LOCATION_UNAVAILABLE)

        locked = self.locked_category()
        if locked is not None and locked != category:
            return self._reject(RejectReason.CATEGORY_MISMATCH)

        record = FieldRecord(
            sequence_index=len(self._records) + 1,
            timestamp=self.clock(),
            latitude=fix.latitude,
            longitude=fix.longitude,
            horizontal_accuracy=fix.horizontal_accuracy,
            category=category,
            value=value,
            note=note,
        )
        self._records.append(record)
        self.last_rejection = None
        logger.debug("recorded #%d %s", record.sequence_index, category.value)
        return True

    def _reject(self, reason: RejectReason) -> bool:
        self.last_rejection = reason
        logger.info("append rejected: %s", reason.value)
        return False

    def delete(self, positions: Iterable[int]) -> int:
        """Remove records at 0-based positions in creation order. Returns the count removed."""
        targets = set(positions)
        size = len(self._records)
        bad = sorted(p for p in targets if not 0 <= p < size)
        if bad:
            raise IndexError(f"record positions out of range: {bad}")
        return self._remove(targets)

    def delete_ids(self, ids: Iterable[UUID]) -> int:
        wanted = set(ids)
        position_of = {r.id: i for i, r in enumerate(self._records)}
        missing = wanted - position_of.keys()
        if missing:
            raise KeyError(f"unknown record ids: {sorted(str(m) for m in missing)}")
        return self._remove({position_of[i] for i in wanted})

    def _remove(self, positions: set) -> int:
        if not positions:
            return 0
        self._records = [r for i, r in enumerate(self._records) if i not in positions]
        self._renumber()
        return len(positions)

    def _renumber(self) -> None:
        for i, record in enumerate(self._records):
            record.sequence_index = i + 1

    def clear(self) -> None:
        self._records = []

    # --- export ---

    def to_csv(self) -> str:
        return render_csv(self._records)

    def to_geojson(self) -> str:
        return render_geojson(self._records)

    def export_csv(self, out_dir: Path, now: Optional[float] = None) -> Path:
        return write_export("csv", self.to_csv(), out_dir, now)

    def export_geojson(self, out_dir: Path, now: Optional[float] = None) -> Path:
        return write_export("geojson", self.to_geojson(), out_dir, now)
