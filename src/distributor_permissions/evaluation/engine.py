"""Evaluation engine applying one distributor's rule to the location catalog.

Example
-------
::

    engine = EvaluationEngine()
    results = engine.evaluate(distributor, locations)
    allowed = [r.location for r in results if r.allowed]
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from distributor_permissions.catalog.location import Location
from distributor_permissions.distributors.distributor import Distributor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """Decision for a single (distributor, location) pair.

    Attributes
    ----------
    distributor_name:
        Name of the distributor the decision belongs to.
    location:
        ``(city, province, country)`` display triple.
    location_code:
        The hierarchical code passed to the rule.
    allowed:
        Whether the distributor may serve the location.
    """

    distributor_name: str
    location: tuple[str, str, str]
    location_code: str
    allowed: bool

    def __bool__(self) -> bool:
        return self.allowed

    def to_dict(self) -> dict[str, object]:
        city, province, country = self.location
        return {
            "code": self.location_code,
            "city": city,
            "province": province,
            "country": country,
            "allowed": self.allowed,
        }


class EvaluationEngine:
    """Computes a pass/fail decision per location for one distributor.

    The engine holds no state; the same instance may be used from many
    threads at once.
    """

    def evaluate(
        self,
        distributor: Distributor,
        locations: Sequence[Location],
    ) -> tuple[EvaluationResult, ...]:
        """Evaluate ``distributor`` against every location, in catalog order.

        Parameters
        ----------
        distributor:
            The distributor whose rule is applied.
        locations:
            The location catalog. Iteration order is preserved in the output.

        Returns
        -------
        tuple[EvaluationResult, ...]
            One result per location.
        """
        results = tuple(
            EvaluationResult(
                distributor_name=distributor.name,
                location=location.display,
                location_code=location.code,
                allowed=distributor.rule.permit(location.code),
            )
            for location in locations
        )
        logger.debug(
            "Evaluated %s: %d/%d locations allowed",
            distributor.name,
            sum(1 for r in results if r.allowed),
            len(results),
        )
        return results

    def check(self, distributor: Distributor, location_code: str) -> bool:
        """Return the decision of ``distributor`` for a single code."""
        allowed = distributor.rule.permit(location_code)
        logger.debug(
            "Permission %s: distributor=%s code=%s",
            "ALLOW" if allowed else "DENY",
            distributor.name,
            location_code,
        )
        return allowed
