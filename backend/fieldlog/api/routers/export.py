# backend/fieldlog/api/routers/export.py
from fastapi import APIRouter, Depends, HTTPException, Response

from fieldlog.errors import ExportError
from fieldlog.services.export.files import MEDIA_TYPES
from fieldlog.state import FieldState, get_state

router = APIRouter()


def _write(field: FieldState, kind: str):
    # runs on the owner context so a concurrent clear cannot slip in between
    log = field.log
    if not log.is_locked():
        return None
    path = log.export_csv(field.export_dir) if kind == "csv" else log.export_geojson(field.export_dir)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ExportError(f"could not read back {path.name}: {exc}", kind=kind) from exc
    return path, data


def _export(field: FieldState, kind: str) -> Response:
    try:
        written = field.context.call(_write, field, kind)
    except ExportError as exc:
        raise HTTPException(status_code=500, detail=f"no file produced: {exc.message}")
    if written is None:
        raise HTTPException(status_code=409, detail="nothing to export")
    path, data = written
    headers = {
        "Content-Disposition": f"attachment; filename=\"{path.name}\"",
        "X-Export-Path": str(path),
    }
    return Response(content=data, media_type=MEDIA_TYPES[kind], headers=headers)


@router.get("/csv")
def export_csv(field: FieldState = Depends(get_state)):
    return _export(field, "csv")


@router.get("/geojson")
def export_geojson(field: FieldState = Depends(get_state)):
    return _export(field, "geojson")
