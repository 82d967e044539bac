# backend/fieldlog/services/export/files.py
from __future__ import annotations

import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Optional

from fieldlog.errors import ExportError

logger = logging.getLogger(__name__)

EXTENSIONS = {"csv": ".csv", "geojson": ".geojson"}
MEDIA_TYPES = {"csv": "text/csv", "geojson": "application/geo+json"}


def export_filename(kind: str, now: Optional[float] = None) -> str:
    if kind not in EXTENSIONS:
        raise ValueError(f"unknown export kind: {kind}")
    epoch = int(now if now is not None else time.time())
    return f"GeoLog_{epoch}{EXTENSIONS[kind]}"


def write_export(kind: str, content: str, out_dir: Path, now: Optional[float] = None) -> Path:
    """Write ``content`` to ``out_dir/GeoLog_<epoch>.<ext>`` atomically and return the path.

    On failure nothing is left at the target path and ExportError is raised.
    """
    out = out_dir / export_filename(kind, now)
    tmp_name = None
    try:
        data = content.encode("utf-8")
        out_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".GeoLog_", suffix=".part", dir=out_dir)
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        Path(tmp_name).replace(out)
    except (OSError, UnicodeError) as exc:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        logger.error("export %s failed: %s", kind, exc)
        raise ExportError(f"could not write {out.name}: {exc}", kind=kind) from exc
    logger.info("exported %s to %s", kind, out)
    return out
