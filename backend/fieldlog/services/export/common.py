# backend/fieldlog/services/export/common.py
from datetime import datetime, timezone

FULLWIDTH_COMMA = "，"


def format_timestamp(ts: datetime) -> str:
    """ISO 8601 in UTC with a Z suffix, second precision."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
