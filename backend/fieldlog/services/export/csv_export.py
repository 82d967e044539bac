# backend/fieldlog/services/export/csv_export.py
from typing import Iterable

from fieldlog.models.record import FieldRecord

from .common import FULLWIDTH_COMMA, format_timestamp

CSV_HEADER = "index,timestamp,lat,lon,h_acc,type,value,note"


def csv_line(r: FieldRecord) -> str:
    # No quoting: commas inside notes are swapped for a full-width comma instead
    value = f"{r.value:.2f}" if r.value is not None else ""
    note = (r.note or "").replace(",", FULLWIDTH_COMMA)
    fields = (
        str(r.sequence_index),
        format_timestamp(r.timestamp),
        repr(r.latitude),
        repr(r.longitude),
        repr(r.horizontal_accuracy),
        r.category.label,
        value,
        note,
    )
    return ",".join(fields)


def render_csv(records: Iterable[FieldRecord]) -> str:
    rows = sorted(records, key=lambda r: r.sequence_index)
    lines = [CSV_HEADER] + [csv_line(r) for r in rows]
    return "\n".join(lines) + "\n"
