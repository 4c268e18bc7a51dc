"""Evaluation engine and concurrent, order-preserving result aggregation."""
from __future__ import annotations

from distributor_permissions.evaluation.aggregator import (
    DistributorReport,
    Report,
    ResultAggregator,
)
from distributor_permissions.evaluation.engine import EvaluationEngine, EvaluationResult

__all__ = [
    "DistributorReport",
    "EvaluationEngine",
    "EvaluationResult",
    "Report",
    "ResultAggregator",
]
