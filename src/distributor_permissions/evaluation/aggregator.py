"""Concurrent fan-out/fan-in of distributor evaluations.

ResultAggregator submits one evaluation task per distributor to a thread
pool and assembles a :class:`Report` whose block order is the distributor
submission order. Tasks finish in arbitrary order; each future is tagged
with its submission index and its output is written to a slot reserved for
that index, so completion order never leaks into the report.

Example
-------
::

    aggregator = ResultAggregator(max_workers=4)
    report = aggregator.aggregate(distributors, locations)
    for block in report:
        print(block.distributor_name, block.allowed_count)
"""
from __future__ import annotations

import concurrent.futures
import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from distributor_permissions.catalog.location import Location
from distributor_permissions.distributors.distributor import Distributor
from distributor_permissions.evaluation.engine import EvaluationEngine, EvaluationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DistributorReport:
    """Ordered decisions for one distributor.

    Attributes
    ----------
    distributor_name:
        Name of the evaluated distributor.
    index:
        Zero-based submission position of the distributor.
    results:
        One EvaluationResult per location, in catalog order.
    """

    distributor_name: str
    index: int
    results: tuple[EvaluationResult, ...]

    def __iter__(self) -> Iterator[EvaluationResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    @property
    def allowed_count(self) -> int:
        return sum(1 for r in self.results if r.allowed)

    def to_dict(self) -> dict[str, object]:
        return {
            "distributor": self.distributor_name,
            "results": [r.to_dict() for r in self.results],
        }


@dataclass(frozen=True)
class Report:
    """Per-distributor result blocks in distributor submission order."""

    blocks: tuple[DistributorReport, ...] = ()

    def __iter__(self) -> Iterator[DistributorReport]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def __getitem__(self, index: int) -> DistributorReport:
        return self.blocks[index]

    @property
    def distributor_names(self) -> list[str]:
        return [block.distributor_name for block in self.blocks]

    def block_for(self, distributor_name: str) -> DistributorReport | None:
        """Return the first block for ``distributor_name``, or ``None``."""
        for block in self.blocks:
            if block.distributor_name == distributor_name:
                return block
        return None

    def to_dict(self) -> dict[str, object]:
        return {"distributors": [block.to_dict() for block in self.blocks]}


class ResultAggregator:
    """Evaluates all distributors concurrently and restores submission order.

    Parameters
    ----------
    engine:
        Engine used for each distributor. A fresh :class:`EvaluationEngine`
        is created when omitted.
    max_workers:
        Thread pool size. Defaults to one worker per distributor.
    """

    def __init__(
        self,
        engine: EvaluationEngine | None = None,
        max_workers: int | None = None,
    ) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be at least 1; got {max_workers}.")
        self._engine = engine or EvaluationEngine()
        self._max_workers = max_workers

    def aggregate(
        self,
        distributors: Sequence[Distributor],
        locations: Sequence[Location],
    ) -> Report:
        """Evaluate every distributor against ``locations``.

        Parameters
        ----------
        distributors:
            Distributors in submission order.
        locations:
            The shared, read-only location catalog.

        Returns
        -------
        Report
            One block per distributor, in submission order.

        Raises
        ------
        Exception
            Any exception raised by an evaluation task is re-raised here and
            no report is produced.
        """
        if not distributors:
            return Report()

        catalog = tuple(locations)
        workers = self._max_workers or len(distributors)
        slots: list[tuple[EvaluationResult, ...] | None] = [None] * len(distributors)

        logger.info(
            "Evaluating %d distributors against %d locations (workers=%d)",
            len(distributors),
            len(catalog),
            workers,
        )
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(self._engine.evaluate, distributor, catalog): index
                for index, distributor in enumerate(distributors)
            }
            try:
                for future in concurrent.futures.as_completed(futures):
                    index = futures[future]
                    slots[index] = future.result()
                    logger.debug(
                        "Distributor %s finished (index=%d)",
                        distributors[index].name,
                        index,
                    )
            except BaseException:
                for pending in futures:
                    pending.cancel()
                raise

        blocks: list[DistributorReport] = []
        for index, distributor in enumerate(distributors):
            results = slots[index]
            if results is None:
                raise RuntimeError(f"No result recorded for distributor index {index}.")
            blocks.append(
                DistributorReport(
                    distributor_name=distributor.name,
                    index=index,
                    results=results,
                )
            )
        return Report(blocks=tuple(blocks))
