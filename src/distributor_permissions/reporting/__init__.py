"""Report renderers (text, Rich table, JSON)."""
from __future__ import annotations

from distributor_permissions.reporting.renderer import OUTPUT_FORMATS, ReportRenderer

__all__ = ["OUTPUT_FORMATS", "ReportRenderer"]
