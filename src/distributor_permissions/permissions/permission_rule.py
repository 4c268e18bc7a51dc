"""Permission rules deciding whether a distributor may serve a location.

Each PermissionRule subclass implements :meth:`PermissionRule.permit`, a
total function over location codes. The evaluation engine only ever calls
``permit``, so new matching strategies are added as new subclasses and
registered in the factory below.

Supported rule types:
- PrefixPermissionRule: hierarchical include/exclude by code scope
- ExactPermissionRule: include/exclude by exact code membership

In both variants exclusion is checked before inclusion, and a code that
matches no include entry is denied.

Factory
-------
Use ``build_rule`` to construct the right subclass from a config
dictionary (used by the distributor loader).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field

from distributor_permissions.catalog.location import CODE_SEPARATOR


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------


class PermissionRule(ABC):
    """Abstract capability: decide whether a location code is permitted."""

    @abstractmethod
    def permit(self, location_code: str) -> bool:
        """Return True if the rule grants access to ``location_code``.

        Implementations must be pure and must never raise.
        """

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the short type identifier for this rule."""

    @abstractmethod
    def describe(self) -> str:
        """Return a one-line human-readable summary of the rule."""


# ---------------------------------------------------------------------------
# PrefixPermissionRule
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PrefixPermissionRule(PermissionRule):
    """Include/exclude rule matched by hierarchical code scope.

    Codes are written most-specific-first, so a code falls within a scope
    when it equals the scope or ends with ``"-" + scope`` (see
    :func:`within_scope`). A country grant (``"IN"``) can therefore be
    narrowed by a province carve-out (``"TAMILNADU-IN"``). A city grant
    never widens to its province: ``"HUBLI-KARNATAKA-IN"`` does not cover
    ``"KARNATAKA-IN"``.

    Attributes
    ----------
    include:
        Ordered scopes that grant access.
    exclude:
        Ordered scopes that revoke access. Always checked first.

    Examples
    --------
    ::

        rule = PrefixPermissionRule(include=("IN",), exclude=("TAMILNADU-IN",))
        assert rule.permit("BANGALORE-KARNATAKA-IN") is True
        assert rule.permit("CHENNAI-TAMILNADU-IN") is False
    """

    include: tuple[str, ...] = field(default_factory=tuple)
    exclude: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Callers may pass lists.
        object.__setattr__(self, "include", tuple(self.include))
        object.__setattr__(self, "exclude", tuple(self.exclude))

    @property
    def rule_type(self) -> str:
        return "prefix"

    def permit(self, location_code: str) -> bool:
        for excluded in self.exclude:
            if within_scope(location_code, excluded):
                return False
        for included in self.include:
            if within_scope(location_code, included):
                return True
        return False

    def describe(self) -> str:
        return _describe(self.rule_type, self.include, self.exclude)


# ---------------------------------------------------------------------------
# ExactPermissionRule
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ExactPermissionRule(PermissionRule):
    """Include/exclude rule matched by exact code membership.

    Useful when a distributor is licensed for an explicit list of cities
    and must not pick up new cities added under the same province.
    """

    include: frozenset[str] = field(default_factory=frozenset)
    exclude: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "include", frozenset(self.include))
        object.__setattr__(self, "exclude", frozenset(self.exclude))

    @property
    def rule_type(self) -> str:
        return "exact"

    def permit(self, location_code: str) -> bool:
        if location_code in self.exclude:
            return False
        return location_code in self.include

    def describe(self) -> str:
        return _describe(self.rule_type, sorted(self.include), sorted(self.exclude))


def within_scope(location_code: str, scope: str) -> bool:
    """Return True if ``location_code`` lies inside ``scope``.

    Scopes are matched on whole ``-`` separated segments from the broad
    end of the code, so ``"IN"`` covers ``"CHENNAI-TAMILNADU-IN"`` but
    not ``"CHENNAI-TAMILNADU-XIN"``.
    """
    return location_code == scope or location_code.endswith(CODE_SEPARATOR + scope)


def _describe(rule_type: str, include: Iterable[str], exclude: Iterable[str]) -> str:
    include_text = ", ".join(include) or "-"
    exclude_text = ", ".join(exclude) or "-"
    return f"{rule_type}: include [{include_text}] exclude [{exclude_text}]"


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

_RULE_TYPE_MAP: dict[str, type[PermissionRule]] = {
    "prefix": PrefixPermissionRule,
    "exact": ExactPermissionRule,
}


def build_rule(data: dict[str, object]) -> PermissionRule:
    """Build a PermissionRule subclass from a config dictionary.

    Parameters
    ----------
    data:
        Dictionary with optional ``type`` (default ``"prefix"``) and
        ``include`` / ``exclude`` lists of code strings.

    Returns
    -------
    PermissionRule

    Raises
    ------
    ValueError
        If the type is unknown or include/exclude are not lists of strings.
    """
    rule_type = str(data.get("type", "prefix"))
    if rule_type not in _RULE_TYPE_MAP:
        raise ValueError(
            f"Unknown rule type {rule_type!r}. "
            f"Known types: {sorted(_RULE_TYPE_MAP.keys())}."
        )

    include = _code_list(data, "include")
    exclude = _code_list(data, "exclude")

    match rule_type:
        case "exact":
            return ExactPermissionRule(
                include=frozenset(include), exclude=frozenset(exclude)
            )
        case _:
            return PrefixPermissionRule(include=tuple(include), exclude=tuple(exclude))


def _code_list(data: dict[str, object], key: str) -> list[str]:
    raw = data.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"Rule '{key}' must be a list; got {type(raw).__name__}.")
    codes: list[str] = []
    for item in raw:
        if not isinstance(item, str):
            raise ValueError(f"Rule '{key}' entries must be strings; got {item!r}.")
        code = item.strip()
        if code:
            codes.append(code)
    return codes
