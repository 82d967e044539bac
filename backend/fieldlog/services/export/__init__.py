from .csv_export import CSV_HEADER, csv_line, render_csv
from .files import export_filename, write_export
from .geojson import feature_collection, record_feature, render_geojson

__all__ = [
    "CSV_HEADER",
    "csv_line",
    "render_csv",
    "export_filename",
    "write_export",
    "feature_collection",
    "record_feature",
    "render_geojson",
]
