#!/usr/bin/env python3
"""Example: distributors from YAML (distributor-permissions)

Define distributors in YAML, including an exact-match rule, and render
the report as a Rich table.

Usage:
    python examples/02_distributor_config.py
"""
from __future__ import annotations

import distributor_permissions as dp

_DISTRIBUTORS = """
version: "1.0"
distributors:
  - name: SOUTH-INDIA
    include: [KARNATAKA-IN, TAMILNADU-IN]
    exclude: [CHENNAI-TAMILNADU-IN]
  - name: CITY-LICENSE
    type: exact
    include: [HUBLI-KARNATAKA-IN, NEWYORK-NY-US]
"""

_CITIES = """\
CHENNAI,TAMILNADU,IN,Chennai,Tamil Nadu,India
BANGALORE,KARNATAKA,IN,Bangalore,Karnataka,India
HUBLI,KARNATAKA,IN,Hubli,Karnataka,India
NEWYORK,NY,US,New York,New York,United States
"""


def main() -> None:
    distributors = dp.DistributorLoader(strict=True).load_from_yaml_string(_DISTRIBUTORS)
    locations = dp.LocationLoader().load_from_string(_CITIES)
    report = dp.ResultAggregator(max_workers=2).aggregate(distributors, locations)
    print(dp.ReportRenderer().render_table(report))


if __name__ == "__main__":
    main()
