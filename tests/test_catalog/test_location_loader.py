"""Tests for Location and LocationLoader."""
from __future__ import annotations

from pathlib import Path

import pytest

from distributor_permissions.catalog.loader import (
    LocationLoader,
    LocationSourceError,
    MalformedRecordError,
    SourceUnavailableError,
)
from distributor_permissions.catalog.location import Location, compose_code

_CSV_TEXT = (
    "City Code,Province Code,Country Code,City Name,Province Name,Country Name\n"
    "CHENNAI,TAMILNADU,IN,Chennai,Tamil Nadu,India\n"
    "BANGALORE,KARNATAKA,IN,Bangalore,Karnataka,India\n"
    "HUBLI,KARNATAKA,IN,Hubli,Karnataka,India\n"
)


@pytest.fixture()
def loader() -> LocationLoader:
    return LocationLoader()


@pytest.fixture()
def csv_path(tmp_path: Path) -> Path:
    path = tmp_path / "cities.csv"
    path.write_text(_CSV_TEXT, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------


class TestLocation:
    def test_from_record_composes_full_code(self) -> None:
        loc = Location.from_record(
            ["CHENNAI", "TAMILNADU", "IN", "Chennai", "Tamil Nadu", "India"]
        )
        assert loc.code == "CHENNAI-TAMILNADU-IN"
        assert loc.province_code == "TAMILNADU"
        assert loc.country_code == "IN"

    def test_from_record_keeps_full_code(self) -> None:
        loc = Location.from_record(
            ["HUBLI-KARNATAKA-IN", "KARNATAKA", "IN", "Hubli", "Karnataka", "India"]
        )
        assert loc.code == "HUBLI-KARNATAKA-IN"

    def test_from_record_strips_whitespace(self) -> None:
        loc = Location.from_record(
            [" PUNE ", "MAHARASHTRA", "IN ", " Pune", "Maharashtra", "India"]
        )
        assert loc.code == "PUNE-MAHARASHTRA-IN"
        assert loc.city_name == "Pune"

    def test_from_record_wrong_length_raises(self) -> None:
        with pytest.raises(ValueError, match="6 fields"):
            Location.from_record(["CHENNAI", "TAMILNADU", "IN"])

    def test_display_triple(self) -> None:
        loc = Location.from_record(
            ["CHENNAI", "TAMILNADU", "IN", "Chennai", "Tamil Nadu", "India"]
        )
        assert loc.display == ("Chennai", "Tamil Nadu", "India")

    def test_frozen(self) -> None:
        loc = Location("IN", "", "IN", "", "", "India")
        with pytest.raises((AttributeError, TypeError)):
            loc.code = "US"  # type: ignore[misc]


class TestComposeCode:
    def test_bare_city(self) -> None:
        assert compose_code("HUBLI", "KARNATAKA", "IN") == "HUBLI-KARNATAKA-IN"

    def test_already_composed(self) -> None:
        assert compose_code("HUBLI-KARNATAKA-IN", "KARNATAKA", "IN") == "HUBLI-KARNATAKA-IN"

    def test_missing_province(self) -> None:
        assert compose_code("SINGAPORE", "", "SG") == "SINGAPORE-SG"


# ---------------------------------------------------------------------------
# LocationLoader
# ---------------------------------------------------------------------------


class TestLocationLoaderFromFile:
    def test_loads_all_records(self, loader: LocationLoader, csv_path: Path) -> None:
        locations = loader.load(csv_path)
        assert len(locations) == 3

    def test_preserves_file_order(self, loader: LocationLoader, csv_path: Path) -> None:
        codes = [loc.code for loc in loader.load(csv_path)]
        assert codes == [
            "CHENNAI-TAMILNADU-IN",
            "BANGALORE-KARNATAKA-IN",
            "HUBLI-KARNATAKA-IN",
        ]

    def test_returns_tuple(self, loader: LocationLoader, csv_path: Path) -> None:
        assert isinstance(loader.load(csv_path), tuple)

    def test_accepts_string_path(self, loader: LocationLoader, csv_path: Path) -> None:
        assert len(loader.load(str(csv_path))) == 3

    def test_missing_file_raises_source_unavailable(
        self, loader: LocationLoader, tmp_path: Path
    ) -> None:
        with pytest.raises(SourceUnavailableError) as exc_info:
            loader.load(tmp_path / "missing.csv")
        assert exc_info.value.source is not None
        assert "missing.csv" in str(exc_info.value)

    def test_directory_raises_source_unavailable(
        self, loader: LocationLoader, tmp_path: Path
    ) -> None:
        with pytest.raises(SourceUnavailableError):
            loader.load(tmp_path)

    def test_malformed_record_fails_whole_load(
        self, loader: LocationLoader, tmp_path: Path
    ) -> None:
        path = tmp_path / "bad.csv"
        path.write_text(_CSV_TEXT + "PUNE,MAHARASHTRA,IN,Pune\n", encoding="utf-8")
        with pytest.raises(MalformedRecordError) as exc_info:
            loader.load(path)
        assert exc_info.value.line_number == 5
        assert exc_info.value.record == ["PUNE", "MAHARASHTRA", "IN", "Pune"]

    def test_errors_share_base_class(self) -> None:
        assert issubclass(SourceUnavailableError, LocationSourceError)
        assert issubclass(MalformedRecordError, LocationSourceError)


class TestLocationLoaderFromString:
    def test_header_skipped_by_default(self, loader: LocationLoader) -> None:
        locations = loader.load_from_string(_CSV_TEXT)
        assert locations[0].city_name == "Chennai"

    def test_no_header_mode_rejects_header_row(self) -> None:
        no_header = LocationLoader(skip_header=False)
        locations = no_header.load_from_string(_CSV_TEXT)
        assert locations[0].city_name == "City Name"

    def test_headerless_input(self, loader: LocationLoader) -> None:
        text = "PUNE,MAHARASHTRA,IN,Pune,Maharashtra,India\n"
        locations = loader.load_from_string(text)
        assert [loc.code for loc in locations] == ["PUNE-MAHARASHTRA-IN"]

    def test_blank_lines_ignored(self, loader: LocationLoader) -> None:
        text = "\nPUNE,MAHARASHTRA,IN,Pune,Maharashtra,India\n\n"
        assert len(loader.load_from_string(text)) == 1

    def test_too_many_fields_rejected(self, loader: LocationLoader) -> None:
        text = "PUNE,MAHARASHTRA,IN,Pune,Maharashtra,India,extra\n"
        with pytest.raises(MalformedRecordError, match="got 7"):
            loader.load_from_string(text)

    def test_quoted_fields(self, loader: LocationLoader) -> None:
        text = 'DELHI,DL,IN,"New Delhi, NCT",Delhi,India\n'
        locations = loader.load_from_string(text)
        assert locations[0].city_name == "New Delhi, NCT"

    def test_empty_input(self, loader: LocationLoader) -> None:
        assert loader.load_from_string("") == ()


class TestLocationLoaderFromRecords:
    def test_records(self, loader: LocationLoader) -> None:
        locations = loader.load_from_records(
            [["NEWYORK", "NY", "US", "New York", "New York", "United States"]]
        )
        assert locations[0].code == "NEWYORK-NY-US"
