from __future__ import annotations

import logging
import time
from pathlib import Path

from .errors import InputNotFound, OperationFailed, SetupFailed
from .models import OperationOutcome, SolverHandle, check_part

logger = logging.getLogger(__name__)


def run_operation(handle: SolverHandle, input_path: Path, part: int) -> OperationOutcome:
    """Run one part of a solver on ``input_path`` with a fresh instance.

    Raises ``InputNotFound`` when the input file is missing. Errors raised by
    the solver itself are returned as failure outcomes.
    """
    check_part(part)
    input_path = Path(input_path)
    if not input_path.is_file():
        raise InputNotFound(input_path)

    year, day = handle.key.year, handle.key.day

    try:
        instance = handle.create()
        instance.set_input_path(input_path)
        instance.setup()
    except (Exception, SystemExit) as exc:
        err = SetupFailed(year, day, part, exc)
        logger.warning("%s part %d: %s", handle.key, part, err)
        logger.debug("Setup traceback", exc_info=True)
        return OperationOutcome.failure(part, str(err))

    func = instance.part1 if part == 1 else instance.part2
    start_time = time.perf_counter()
    try:
        result = func()
    except (Exception, SystemExit) as exc:
        err = OperationFailed(year, day, part, exc)
        logger.warning("%s part %d: %s", handle.key, part, err)
        logger.debug("Part traceback", exc_info=True)
        return OperationOutcome.failure(part, str(err))
    elapsed_ms = (time.perf_counter() - start_time) * 1000.0

    logger.debug("%s part %d -> %s (%.3f ms)", handle.key, part, result, elapsed_ms)
    return OperationOutcome.success(part, str(result), elapsed_ms)
