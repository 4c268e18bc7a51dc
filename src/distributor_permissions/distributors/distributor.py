"""Distributor: a name bound to exactly one permission rule."""
from __future__ import annotations

from dataclasses import dataclass

from distributor_permissions.permissions.permission_rule import (
    PermissionRule,
    PrefixPermissionRule,
    build_rule,
)


@dataclass(frozen=True)
class Distributor:
    """An immutable distributor and its permission rule.

    Attributes
    ----------
    name:
        Display name, expected to be unique within a run (not enforced).
    rule:
        The PermissionRule deciding which locations this distributor serves.
    """

    name: str
    rule: PermissionRule

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Distributor:
        """Build a Distributor from a plain dictionary.

        Parameters
        ----------
        data:
            Dictionary with keys ``name``, ``include``, ``exclude`` and an
            optional rule ``type``.

        Raises
        ------
        ValueError
            If ``name`` is missing or the rule fields are invalid.
        """
        name = str(data.get("name", "")).strip()
        if not name:
            raise ValueError("Distributor.name must not be empty.")
        return cls(name=name, rule=build_rule(data))

    def permit(self, location_code: str) -> bool:
        """Shortcut for ``self.rule.permit(location_code)``."""
        return self.rule.permit(location_code)


DEFAULT_DISTRIBUTORS: tuple[Distributor, ...] = (
    Distributor(
        name="DISTRIBUTOR1",
        rule=PrefixPermissionRule(
            include=("IN", "US"),
            exclude=("KARNATAKA-IN", "CHENNAI-TAMILNADU-IN"),
        ),
    ),
    Distributor(
        name="DISTRIBUTOR2",
        rule=PrefixPermissionRule(include=("IN",), exclude=("TAMILNADU-IN",)),
    ),
    Distributor(
        name="DISTRIBUTOR3",
        rule=PrefixPermissionRule(include=("HUBLI-KARNATAKA-IN",)),
    ),
)
