# backend/fieldlog/models/category.py
from enum import Enum
from typing import Optional


class ObservationCategory(str, Enum):
    LIGHT = "light"
    TREE = "tree"
    MICROCLIMATE = "microclimate"
    SIDEWALK = "sidewalk"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def value_title(self) -> str:
        return _VALUE_FIELDS[self][0]

    @property
    def unit(self) -> Optional[str]:
        return _VALUE_FIELDS[self][1]

    @property
    def takes_note(self) -> bool:
        # Light readings are a bare number; every other form has a note row
        return self is not ObservationCategory.LIGHT


_LABELS = {
    ObservationCategory.LIGHT: "Light",
    ObservationCategory.TREE: "Tree",
    ObservationCategory.MICROCLIMATE: "Microclimate",
    ObservationCategory.SIDEWALK: "Sidewalk",
    ObservationCategory.CUSTOM: "Custom",
}

# (title, unit) of the numeric field shown for each category
_VALUE_FIELDS = {
    ObservationCategory.LIGHT: ("Illuminance", "lux"),
    ObservationCategory.TREE: ("Trunk diameter", "cm"),
    ObservationCategory.MICROCLIMATE: ("Temperature", "°C"),
    ObservationCategory.SIDEWALK: ("Clear width", "cm"),
    ObservationCategory.CUSTOM: ("Value", None),
}
