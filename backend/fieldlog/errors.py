# backend/fieldlog/errors.py
from enum import Enum


class RejectReason(str, Enum):
    """Why an append was refused. Rejections are silent to the caller."""

    LOCATION_UNAVAILABLE = "location_unavailable"
    CATEGORY_MISMATCH = "category_mismatch"
    EMPTY_INPUT = "empty_input"


class FieldLogError(Exception):
    pass


class ExportError(FieldLogError):
    """No export file was produced (encoding or write failure)."""

    def __init__(self, message: str, kind: str | None = None):
        super().__init__(message)
        self.message = message
        self.kind = kind
