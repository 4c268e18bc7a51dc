"""Location records for the distributor permission catalog.

A Location is identified by a hierarchical code written most-specific-first,
e.g. ``CHENNAI-TAMILNADU-IN``. Broader scopes (province, country) are
suffixes of the full code, so a rule scope at any granularity matches a
code that equals it or ends with ``"-" + scope``.

Example
-------
::

    loc = Location.from_record(
        ["CHENNAI", "TAMILNADU", "IN", "Chennai", "Tamil Nadu", "India"]
    )
    assert loc.code == "CHENNAI-TAMILNADU-IN"
    assert loc.display == ("Chennai", "Tamil Nadu", "India")
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

RECORD_FIELD_COUNT: int = 6
CODE_SEPARATOR: str = "-"


@dataclass(frozen=True)
class Location:
    """An immutable catalog entry for a single city.

    Attributes
    ----------
    code:
        Full hierarchical code, e.g. ``"HUBLI-KARNATAKA-IN"``.
    province_code:
        Province scope, e.g. ``"KARNATAKA"``.
    country_code:
        Country scope, e.g. ``"IN"``.
    city_name:
        Display name of the city.
    province_name:
        Display name of the province.
    country_name:
        Display name of the country.
    """

    code: str
    province_code: str
    country_code: str
    city_name: str
    province_name: str
    country_name: str

    @classmethod
    def from_record(cls, fields: Sequence[str]) -> Location:
        """Build a Location from the six ordered fields of a tabular record.

        Field order is city code, province code, country code, city name,
        province name, country name. When the city code is a bare city code
        the full hierarchical code is composed from the three code fields.

        Raises
        ------
        ValueError
            If ``fields`` does not hold exactly six values.
        """
        if len(fields) != RECORD_FIELD_COUNT:
            raise ValueError(
                f"Location record must have {RECORD_FIELD_COUNT} fields; "
                f"got {len(fields)}."
            )
        city_code, province_code, country_code, city, province, country = (
            value.strip() for value in fields
        )
        return cls(
            code=compose_code(city_code, province_code, country_code),
            province_code=province_code,
            country_code=country_code,
            city_name=city,
            province_name=province,
            country_name=country,
        )

    @property
    def display(self) -> tuple[str, str, str]:
        """Return the ``(city, province, country)`` display triple."""
        return (self.city_name, self.province_name, self.country_name)


def compose_code(city_code: str, province_code: str, country_code: str) -> str:
    """Return the full most-specific-first code for a city.

    A city code that already ends with its province and country scopes is
    returned unchanged.
    """
    suffix = CODE_SEPARATOR.join(part for part in (province_code, country_code) if part)
    if not suffix or city_code == suffix or city_code.endswith(CODE_SEPARATOR + suffix):
        return city_code
    return CODE_SEPARATOR.join(part for part in (city_code, suffix) if part)
