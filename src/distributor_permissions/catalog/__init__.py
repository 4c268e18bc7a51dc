"""Location catalog: immutable location records and the CSV loader."""
from __future__ import annotations

from distributor_permissions.catalog.loader import (
    LocationLoader,
    LocationSourceError,
    MalformedRecordError,
    SourceUnavailableError,
)
from distributor_permissions.catalog.location import Location, compose_code

__all__ = [
    "Location",
    "LocationLoader",
    "LocationSourceError",
    "MalformedRecordError",
    "SourceUnavailableError",
    "compose_code",
]
