# backend/fieldlog/schemas/record.py
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from fieldlog.errors import RejectReason
from fieldlog.models.category import ObservationCategory
from fieldlog.models.record import FieldRecord


class RecordIn(BaseModel):
    category: ObservationCategory
    value: Optional[float] = Field(None, allow_inf_nan=False)
    note: Optional[str] = None

    @field_validator("note")
    @classmethod
    def blank_note_is_none(cls, v):
        if v is None or not v.strip():
            return None
        # lone surrogates survive JSON decoding but can never be exported
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("note is not valid UTF-8 text")
        return v

    # at least one of value/note
    @model_validator(mode="after")
    def require_value_or_note(self):
        if self.value is None and self.note is None:
            raise ValueError(f"{RejectReason.EMPTY_INPUT.value}: value or note is required")
        return self


class RecordOut(BaseModel):
    id: UUID
    index: int
    timestamp: datetime
    latitude: float
    longitude: float
    horizontal_accuracy: float
    category: ObservationCategory
    label: str
    value: Optional[float] = None
    note: Optional[str] = None

    @classmethod
    def of(cls, r: FieldRecord) -> "RecordOut":
        return cls(
            id=r.id,
            index=r.sequence_index,
            timestamp=r.timestamp,
            latitude=r.latitude,
            longitude=r.longitude,
            horizontal_accuracy=r.horizontal_accuracy,
            category=r.category,
            label=r.category.label,
            value=r.value,
            note=r.note,
        )


class RecordList(BaseModel):
    count: int
    locked: bool
    locked_category: Optional[ObservationCategory] = None
    records: List[RecordOut]


class DeleteIn(BaseModel):
    ids: List[UUID] = Field(default_factory=list)
    # 0-based positions in creation order
    positions: List[int] = Field(default_factory=list)

    @model_validator(mode="after")
    def one_selector(self):
        if bool(self.ids) == bool(self.positions):
            raise ValueError("give either ids or positions")
        return self
