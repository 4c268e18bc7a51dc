"""distributor-permissions: which distributor may serve which location.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import distributor_permissions as dp
>>> rule = dp.PrefixPermissionRule(include=("IN",), exclude=("TAMILNADU-IN",))
>>> rule.permit("CHENNAI-TAMILNADU-IN")
False
>>> rule.permit("BANGALORE-KARNATAKA-IN")
True
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------
from distributor_permissions.catalog.location import Location
from distributor_permissions.catalog.loader import (
    LocationLoader,
    LocationSourceError,
    MalformedRecordError,
    SourceUnavailableError,
)

# ---------------------------------------------------------------------------
# Permissions
# ---------------------------------------------------------------------------
from distributor_permissions.permissions.permission_rule import (
    ExactPermissionRule,
    PermissionRule,
    PrefixPermissionRule,
    build_rule,
)

# ---------------------------------------------------------------------------
# Distributors
# ---------------------------------------------------------------------------
from distributor_permissions.distributors.distributor import (
    DEFAULT_DISTRIBUTORS,
    Distributor,
)
from distributor_permissions.distributors.distributor_loader import (
    DistributorConfigError,
    DistributorLoader,
)

# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------
from distributor_permissions.evaluation.engine import EvaluationEngine, EvaluationResult
from distributor_permissions.evaluation.aggregator import (
    DistributorReport,
    Report,
    ResultAggregator,
)

# ---------------------------------------------------------------------------
# Reporting and configuration
# ---------------------------------------------------------------------------
from distributor_permissions.reporting.renderer import ReportRenderer
from distributor_permissions.config.config_loader import ConfigLoader, RunConfig

__all__ = [
    "__version__",
    # Catalog
    "Location",
    "LocationLoader",
    "LocationSourceError",
    "MalformedRecordError",
    "SourceUnavailableError",
    # Permissions
    "ExactPermissionRule",
    "PermissionRule",
    "PrefixPermissionRule",
    "build_rule",
    # Distributors
    "DEFAULT_DISTRIBUTORS",
    "Distributor",
    "DistributorConfigError",
    "DistributorLoader",
    # Evaluation
    "DistributorReport",
    "EvaluationEngine",
    "EvaluationResult",
    "Report",
    "ResultAggregator",
    # Reporting and configuration
    "ConfigLoader",
    "ReportRenderer",
    "RunConfig",
]
