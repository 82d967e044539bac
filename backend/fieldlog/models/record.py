# backend/fieldlog/models/record.py
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from .category import ObservationCategory


class FieldRecord(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: UUID = Field(default_factory=uuid4, frozen=True)
    # 1-based position in the session, rewritten after deletions
    sequence_index: int = Field(..., ge=1)
    timestamp: datetime = Field(..., frozen=True)

    latitude: float = Field(..., frozen=True)
    longitude: float = Field(..., frozen=True)
    horizontal_accuracy: float = Field(..., frozen=True)

    category: ObservationCategory = Field(..., frozen=True)
    value: Optional[float] = Field(None, frozen=True)
    note: Optional[str] = Field(None, frozen=True)
