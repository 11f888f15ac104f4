"""
Solve orchestration.

``solve`` ties the registry, the runner and the aggregator together in one of
two modes: a single day (lookup and input errors abort the run) or a whole year
(missing inputs are skipped and solver failures are recorded as rows).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from .errors import InputNotFound
from .models import OperationOutcome, SolverHandle, SolverRunReport, check_part
from .registry import SolverRegistry
from .report import ResultAggregator
from .runner import run_operation
from .utils import input_path_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveRequest:
    year: int
    day: int | None = None
    use_test: bool = False
    part: int | None = None


def selected_parts(part: int | None) -> Tuple[int, ...]:
    if part is None:
        return (1, 2)
    return (check_part(part),)


def solve(request: SolveRequest, registry: SolverRegistry, solutions_dir: Path) -> SolverRunReport:
    parts = selected_parts(request.part)
    if request.day is not None:
        return solve_day(registry.find_one(request.year, request.day), request.use_test, parts, solutions_dir)
    return solve_year(request.year, registry, request.use_test, parts, solutions_dir)


def solve_day(
    handle: SolverHandle,
    use_test: bool,
    parts: Tuple[int, ...],
    solutions_dir: Path,
) -> SolverRunReport:
    year, day = handle.key.year, handle.key.day
    aggregator = ResultAggregator(year, mode="day")
    for part in parts:
        input_path = input_path_for(solutions_dir, year, day, use_test, part)
        logger.info("%s part %d: input %s", handle.key, part, input_path.name)
        try:
            outcome = run_operation(handle, input_path, part)
        except InputNotFound as exc:
            exc.report = aggregator.finalize()
            raise
        aggregator.record(year, day, outcome)
    return aggregator.finalize()


def solve_year(
    year: int,
    registry: SolverRegistry,
    use_test: bool,
    parts: Tuple[int, ...],
    solutions_dir: Path,
) -> SolverRunReport:
    aggregator = ResultAggregator(year, mode="year")
    handles = registry.find_all(year)
    if not handles:
        logger.warning("No solutions found for year %d", year)
        return aggregator.finalize()

    for handle in handles:
        day = handle.key.day
        for part in parts:
            input_path = input_path_for(solutions_dir, year, day, use_test, part)
            if not input_path.is_file():
                logger.debug("%s part %d: skipped, no input file %s", handle.key, part, input_path)
                continue
            try:
                outcome = run_operation(handle, input_path, part)
            except Exception as exc:
                logger.warning("%s part %d: %s", handle.key, part, exc)
                outcome = OperationOutcome.failure(part, str(exc) or type(exc).__name__)
            aggregator.record(year, day, outcome)
    return aggregator.finalize()
