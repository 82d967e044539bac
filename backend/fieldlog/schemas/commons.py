# backend/fieldlog/schemas/commons.py
from pydantic import BaseModel
from typing import Literal

from fieldlog.models.category import ObservationCategory

CategoryName = Literal["light", "tree", "microclimate", "sidewalk", "custom"]


class GeoJSONFeature(BaseModel):
    type: Literal["Feature"] = "Feature"
    geometry: dict
    properties: dict


class CategoryOut(BaseModel):
    id: str
    label: str
    value_title: str
    unit: str | None = None
    takes_note: bool

    @classmethod
    def of(cls, c: ObservationCategory) -> "CategoryOut":
        return cls(id=c.value, label=c.label, value_title=c.value_title, unit=c.unit, takes_note=c.takes_note)
