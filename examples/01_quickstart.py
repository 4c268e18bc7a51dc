#!/usr/bin/env python3
"""Example: Quickstart (distributor-permissions)

Load a small location catalog, evaluate the built-in distributors
concurrently, and print the report in submission order.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install distributor-permissions
"""
from __future__ import annotations

import distributor_permissions as dp

_CITIES = """\
City Code,Province Code,Country Code,City Name,Province Name,Country Name
CHENNAI,TAMILNADU,IN,Chennai,Tamil Nadu,India
BANGALORE,KARNATAKA,IN,Bangalore,Karnataka,India
HUBLI,KARNATAKA,IN,Hubli,Karnataka,India
NEWYORK,NY,US,New York,New York,United States
"""


def main() -> None:
    print(f"distributor-permissions version: {dp.__version__}")

    # Step 1: Load the location catalog
    locations = dp.LocationLoader().load_from_string(_CITIES)
    print(f"Catalog ready: {len(locations)} locations")

    # Step 2: Check a few codes against one rule
    rule = dp.PrefixPermissionRule(include=("IN",), exclude=("TAMILNADU-IN",))
    for code in ("CHENNAI-TAMILNADU-IN", "BANGALORE-KARNATAKA-IN", "US-NY"):
        print(f"  [{'ALLOW' if rule.permit(code) else 'DENY'}] {code}")

    # Step 3: Evaluate every distributor and render the report
    report = dp.ResultAggregator().aggregate(dp.DEFAULT_DISTRIBUTORS, locations)
    print()
    print(dp.ReportRenderer().render_text(report))


if __name__ == "__main__":
    main()
