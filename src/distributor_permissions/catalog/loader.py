"""CSV location catalog loader.

Reads a six-column CSV (city code, province code, country code, city name,
province name, country name) into an immutable, order-stable tuple of
:class:`Location` records.

Loading is fail-fast: a source that cannot be read raises
:class:`SourceUnavailableError`, and any record with the wrong field count
raises :class:`MalformedRecordError`. No partially populated catalog is
ever returned.

Example
-------
::

    loader = LocationLoader()
    locations = loader.load("cities.csv")
    print(len(locations))
"""
from __future__ import annotations

import csv
import io
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from distributor_permissions.catalog.location import RECORD_FIELD_COUNT, Location

logger = logging.getLogger(__name__)

_HEADER_FIRST_CELL: str = "city code"


class LocationSourceError(Exception):
    """Base class for errors raised while loading the location catalog."""


class SourceUnavailableError(LocationSourceError):
    """Raised when the location source cannot be opened or read.

    Attributes
    ----------
    source:
        The path or identifier of the unreadable source.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        prefix = f"[{source}] " if source else ""
        super().__init__(f"{prefix}{message}")


class MalformedRecordError(LocationSourceError):
    """Raised when a record does not have exactly six fields.

    Attributes
    ----------
    line_number:
        1-based line number of the offending record.
    record:
        The raw field list as read from the source.
    """

    def __init__(self, line_number: int, record: Sequence[str]) -> None:
        self.line_number = line_number
        self.record = list(record)
        super().__init__(
            f"Malformed location record at line {line_number}: expected "
            f"{RECORD_FIELD_COUNT} fields, got {len(record)}."
        )


class LocationLoader:
    """Loads the location catalog from CSV files or strings.

    Parameters
    ----------
    skip_header:
        When ``True`` (default), a first row whose first cell reads
        ``City Code`` is treated as a header and skipped.
    """

    def __init__(self, skip_header: bool = True) -> None:
        self._skip_header = skip_header

    def load(self, csv_path: str | Path) -> tuple[Location, ...]:
        """Load the catalog from a CSV file on disk.

        Raises
        ------
        SourceUnavailableError
            If the file does not exist or cannot be read.
        MalformedRecordError
            If any record has the wrong number of fields.
        """
        csv_path = Path(csv_path)
        try:
            with csv_path.open("r", newline="", encoding="utf-8") as fh:
                locations = self._parse(csv.reader(fh), source=str(csv_path))
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceUnavailableError(
                f"Failed to read location source: {exc}", str(csv_path)
            ) from exc
        return locations

    def load_from_string(
        self,
        csv_text: str,
        source: str | None = None,
    ) -> tuple[Location, ...]:
        """Load the catalog from CSV text held in memory."""
        return self._parse(csv.reader(io.StringIO(csv_text)), source=source)

    def load_from_records(
        self,
        records: Iterable[Sequence[str]],
        source: str | None = None,
    ) -> tuple[Location, ...]:
        """Load the catalog from already-split records."""
        return self._parse(records, source=source)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _parse(
        self,
        rows: Iterable[Sequence[str]],
        source: str | None,
    ) -> tuple[Location, ...]:
        locations: list[Location] = []
        line_number = 0
        try:
            for line_number, row in enumerate(rows, start=1):
                if not row or all(not cell.strip() for cell in row):
                    continue
                if (
                    self._skip_header
                    and not locations
                    and row[0].strip().lower() == _HEADER_FIRST_CELL
                ):
                    continue
                if len(row) != RECORD_FIELD_COUNT:
                    raise MalformedRecordError(line_number, row)
                locations.append(Location.from_record(row))
        except csv.Error as exc:
            raise SourceUnavailableError(
                f"Failed to read CSV line {line_number + 1}: {exc}", source
            ) from exc

        logger.info(
            "Loaded %d locations from %s",
            len(locations),
            source or "<records>",
        )
        return tuple(locations)
