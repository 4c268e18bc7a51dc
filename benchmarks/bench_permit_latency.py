"""Benchmark: PrefixPermissionRule.permit() latency.

Measures single-decision latency for a rule with a realistic number of
country grants and province/city carve-outs.
"""
from __future__ import annotations

import json
import statistics
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from distributor_permissions.permissions.permission_rule import PrefixPermissionRule

_ITERATIONS: int = 50_000

_CODES: list[str] = [
    "CHENNAI-TAMILNADU-IN",
    "BANGALORE-KARNATAKA-IN",
    "HUBLI-KARNATAKA-IN",
    "NEWYORK-NY-US",
    "PARIS-IDF-FR",
]


def bench_permit_latency() -> dict[str, object]:
    """Benchmark PrefixPermissionRule.permit() latency.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p99_latency_ms.
    """
    rule = PrefixPermissionRule(
        include=("IN", "US", "GB", "DE", "JP"),
        exclude=("TAMILNADU-IN", "CA-US", "HUBLI-KARNATAKA-IN"),
    )
    latencies: list[float] = []

    start = time.perf_counter()
    for i in range(_ITERATIONS):
        code = _CODES[i % len(_CODES)]
        t0 = time.perf_counter()
        rule.permit(code)
        latencies.append(time.perf_counter() - t0)
    total = time.perf_counter() - start

    p99 = statistics.quantiles(latencies, n=100)[98] if len(latencies) >= 100 else 0.0
    result: dict[str, object] = {
        "operation": "prefix_permit_latency",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 6),
        "p99_latency_ms": round(p99 * 1000, 6),
    }
    print(
        f"[bench_permit_latency] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.6f} ms"
    )
    return result


def run_benchmark() -> dict[str, object]:
    """Entry point returning the benchmark result dict."""
    return bench_permit_latency()


if __name__ == "__main__":
    result = run_benchmark()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "permit_latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
