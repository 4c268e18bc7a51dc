"""Benchmark: ResultAggregator throughput, decisions per second.

Evaluates a synthetic catalog against a set of distributors through the
thread pool and reports how many (distributor, location) decisions are
produced per second.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from distributor_permissions.catalog.location import Location
from distributor_permissions.distributors.distributor import Distributor
from distributor_permissions.evaluation.aggregator import ResultAggregator
from distributor_permissions.permissions.permission_rule import PrefixPermissionRule

_LOCATIONS: int = 2_000
_DISTRIBUTORS: int = 8
_ROUNDS: int = 5


def _make_catalog() -> tuple[Location, ...]:
    provinces = [("KARNATAKA", "IN"), ("TAMILNADU", "IN"), ("NY", "US"), ("CA", "US")]
    catalog: list[Location] = []
    for i in range(_LOCATIONS):
        province, country = provinces[i % len(provinces)]
        catalog.append(
            Location.from_record(
                [f"CITY{i}", province, country, f"City {i}", province.title(), country]
            )
        )
    return tuple(catalog)


def _make_distributors() -> list[Distributor]:
    return [
        Distributor(
            name=f"DISTRIBUTOR{i}",
            rule=PrefixPermissionRule(
                include=("IN", "US") if i % 2 else ("IN",),
                exclude=("TAMILNADU-IN",) if i % 3 else (f"CITY{i}-KARNATAKA-IN",),
            ),
        )
        for i in range(_DISTRIBUTORS)
    ]


def bench_aggregation_throughput() -> dict[str, object]:
    """Benchmark ResultAggregator.aggregate() throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    catalog = _make_catalog()
    distributors = _make_distributors()
    aggregator = ResultAggregator()

    start = time.perf_counter()
    for _ in range(_ROUNDS):
        aggregator.aggregate(distributors, catalog)
    total = time.perf_counter() - start

    decisions = _ROUNDS * _LOCATIONS * _DISTRIBUTORS
    result: dict[str, object] = {
        "operation": "aggregation_throughput",
        "iterations": _ROUNDS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(decisions / total, 1),
        "avg_latency_ms": round(total / _ROUNDS * 1000, 4),
    }
    print(
        f"[bench_aggregation_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} decisions/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms per report"
    )
    return result


def run_benchmark() -> dict[str, object]:
    """Entry point returning the benchmark result dict."""
    return bench_aggregation_throughput()


if __name__ == "__main__":
    result = run_benchmark()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "aggregation_throughput_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
