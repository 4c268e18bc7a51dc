"""Run configuration schema and loader."""
from __future__ import annotations

from distributor_permissions.config.config_loader import ConfigLoader, RunConfig

__all__ = ["ConfigLoader", "RunConfig"]
