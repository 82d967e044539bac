"""Geo field logger: GPS-tagged observation capture with CSV/GeoJSON export."""

__version__ = "0.1.0"
