"""Distributors and their YAML configuration loader."""
from __future__ import annotations

from distributor_permissions.distributors.distributor import (
    DEFAULT_DISTRIBUTORS,
    Distributor,
)
from distributor_permissions.distributors.distributor_loader import (
    DistributorConfigError,
    DistributorLoader,
)

__all__ = [
    "DEFAULT_DISTRIBUTORS",
    "Distributor",
    "DistributorConfigError",
    "DistributorLoader",
]
