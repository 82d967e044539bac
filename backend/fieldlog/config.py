# backend/fieldlog/config.py
import logging
import os
import tempfile
from pathlib import Path

# 1) FIELDLOG_EXPORT_DIR if set
# 2) otherwise the system temp dir, as a share sheet would expect
_export_dir_env = os.getenv("FIELDLOG_EXPORT_DIR")
EXPORT_DIR = Path(_export_dir_env) if _export_dir_env else Path(tempfile.gettempdir())

LOG_LEVEL = os.getenv("FIELDLOG_LOG_LEVEL", "INFO").upper()

# The push capability has no permission prompt; this decides the answer
AUTO_GRANT = os.getenv("FIELDLOG_AUTO_GRANT", "1") not in ("0", "false", "no")

CORS_ORIGINS = [o.strip() for o in os.getenv("FIELDLOG_CORS_ORIGINS", "*").split(",") if o.strip()]

_configured = False


def configure_logging(level: str | None = None) -> None:
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=getattr(logging, level or LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    _configured = True


def export_dir() -> Path:
    EXPORT_DIR.mkdir(parents=True, exist_ok=True)
    return EXPORT_DIR
