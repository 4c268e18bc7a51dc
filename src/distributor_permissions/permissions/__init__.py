"""Permission rule capability and its matching strategies.

Example
-------
::

    from distributor_permissions.permissions import PrefixPermissionRule

    rule = PrefixPermissionRule(include=("IN",), exclude=("TAMILNADU-IN",))
    assert rule.permit("CHENNAI-TAMILNADU-IN") is False
    assert rule.permit("BANGALORE-KARNATAKA-IN") is True
"""
from __future__ import annotations

from distributor_permissions.permissions.permission_rule import (
    ExactPermissionRule,
    PermissionRule,
    PrefixPermissionRule,
    build_rule,
    within_scope,
)

__all__ = [
    "ExactPermissionRule",
    "PermissionRule",
    "PrefixPermissionRule",
    "build_rule",
    "within_scope",
]
