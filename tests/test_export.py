"""Unit tests for CSV/GeoJSON rendering and export files."""
import json
from datetime import datetime, timedelta, timezone

import pytest

from fieldlog.errors import ExportError
from fieldlog.models.category import ObservationCategory as C
from fieldlog.services.export import CSV_HEADER, export_filename, write_export
from fieldlog.services.export.common import format_timestamp

from conftest import make_fix


@pytest.mark.unit
class TestCSV:

    def test_empty_log_is_header_only(self, session_log):
        assert session_log.to_csv().splitlines() == [CSV_HEADER]

    def test_header(self):
        assert CSV_HEADER == "index,timestamp,lat,lon,h_acc,type,value,note"

    def test_row_format(self, located_log):
        located_log.append(C.LIGHT, 350, None)
        header, row = located_log.to_csv().splitlines()
        assert row == "1,2025-12-13T08:30:00Z,25.03,121.56,5.0,Light,350.00,"

    def test_value_two_decimals_and_absent_value(self, located_log):
        located_log.append(C.TREE, 15.456, "banyan")
        located_log.append(C.TREE, None, "stump")
        rows = located_log.to_csv().splitlines()[1:]
        assert rows[0].split(",")[6] == "15.46"
        assert rows[1].split(",")[6] == ""

    def test_commas_in_notes_substituted(self, located_log):
        located_log.append(C.SIDEWALK, 90, "transformer box, illegal parking, bollard")
        located_log.append(C.SIDEWALK, 120, None)
        lines = located_log.to_csv().splitlines()
        assert len(lines) == 3
        for line in lines[1:]:
            assert len(line.split(",")) == 8
        assert lines[1].split(",")[7] == "transformer box， illegal parking， bollard"

    def test_line_count_matches_records(self, located_log):
        for v in range(5):
            located_log.append(C.MICROCLIMATE, 28.5 + v, "half shade")
        located_log.delete({2})
        assert len(located_log.to_csv().splitlines()) == 5

    def test_export_does_not_mutate(self, located_log):
        located_log.append(C.LIGHT, 1.0)
        located_log.append(C.LIGHT, 2.0, "second")
        before = [r.model_dump() for r in located_log.records()]
        located_log.to_csv()
        located_log.to_geojson()
        assert [r.model_dump() for r in located_log.records()] == before


@pytest.mark.unit
class TestGeoJSON:

    def test_empty_collection(self, session_log):
        assert json.loads(session_log.to_geojson()) == {"type": "FeatureCollection", "features": []}

    def test_coordinates_are_lon_lat(self, capability, located_log):
        located_log.append(C.TREE, 15.5, "banyan")
        capability.deliver(make_fix(lat=-33.8688, lon=151.2093, acc=12.0))
        located_log.append(C.TREE, 30.0, None)
        doc = json.loads(located_log.to_geojson())
        assert len(doc["features"]) == 2
        for feat, rec in zip(doc["features"], located_log.records()):
            assert feat["type"] == "Feature"
            assert feat["geometry"]["type"] == "Point"
            assert feat["geometry"]["coordinates"] == [rec.longitude, rec.latitude]

    def test_properties(self, located_log):
        located_log.append(C.CUSTOM, None, "bench")
        props = json.loads(located_log.to_geojson())["features"][0]["properties"]
        assert props == {
            "index": 1,
            "type": "Custom",
            "value": 0,
            "note": "bench",
            "timestamp": "2025-12-13T08:30:00Z",
        }

    def test_non_finite_value_fails_cleanly(self, located_log):
        located_log.append(C.LIGHT, float("nan"))
        with pytest.raises(ExportError):
            located_log.to_geojson()


@pytest.mark.unit
class TestTimestamp:

    def test_converts_to_utc(self):
        taipei = timezone(timedelta(hours=8))
        assert format_timestamp(datetime(2025, 12, 13, 16, 30, tzinfo=taipei)) == "2025-12-13T08:30:00Z"

    def test_round_trips(self):
        ts = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert datetime.fromisoformat(format_timestamp(ts).replace("Z", "+00:00")) == ts


@pytest.mark.unit
class TestExportFiles:

    def test_filename(self):
        assert export_filename("csv", 1765614600.7) == "GeoLog_1765614600.csv"
        assert export_filename("geojson", 1765614600) == "GeoLog_1765614600.geojson"

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            export_filename("kml", 0)

    def test_session_exports(self, located_log, tmp_path):
        located_log.append(C.LIGHT, 350)
        csv_path = located_log.export_csv(tmp_path, now=100)
        geo_path = located_log.export_geojson(tmp_path, now=100)
        assert csv_path == tmp_path / "GeoLog_100.csv"
        assert csv_path.read_text(encoding="utf-8") == located_log.to_csv()
        assert json.loads(geo_path.read_text(encoding="utf-8"))["features"][0]["properties"]["index"] == 1
        # no temp leftovers
        assert sorted(p.name for p in tmp_path.iterdir()) == ["GeoLog_100.csv", "GeoLog_100.geojson"]

    def test_unencodable_text_leaves_no_file(self, tmp_path):
        with pytest.raises(ExportError):
            write_export("csv", "bad \ud800 surrogate", tmp_path, now=1)
        assert list(tmp_path.iterdir()) == []

    def test_unwritable_dir(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(ExportError):
            write_export("csv", CSV_HEADER + "\n", blocker / "sub", now=1)
