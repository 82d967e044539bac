# backend/fieldlog/services/export/geojson.py
import json
from typing import Iterable

from shapely.geometry import Point, mapping

from fieldlog.errors import ExportError
from fieldlog.models.record import FieldRecord
from fieldlog.schemas.commons import GeoJSONFeature

from .common import format_timestamp


def record_feature(r: FieldRecord) -> dict:
    # GeoJSON is lon/lat (x, y)
    geom = mapping(Point(r.longitude, r.latitude))
    feat = GeoJSONFeature(
        geometry={"type": geom["type"], "coordinates": list(geom["coordinates"])},
        properties={
            "index": r.sequence_index,
            "type": r.category.label,
            "value": r.value if r.value is not None else 0,
            "note": r.note or "",
            "timestamp": format_timestamp(r.timestamp),
        },
    )
    return feat.model_dump()


def feature_collection(records: Iterable[FieldRecord]) -> dict:
    rows = sorted(records, key=lambda r: r.sequence_index)
    return {"type": "FeatureCollection", "features": [record_feature(r) for r in rows]}


def render_geojson(records: Iterable[FieldRecord]) -> str:
    collection = feature_collection(records)
    try:
        # NaN/Infinity are not valid JSON; refuse rather than emit them
        return json.dumps(collection, ensure_ascii=False, indent=2, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise ExportError(f"GeoJSON encoding failed: {exc}", kind="geojson") from exc
