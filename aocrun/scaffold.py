from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader

from .utils import PRODUCTION_INPUT, TEST_INPUTS, ensure_dir, inputs_dir

logger = logging.getLogger(__name__)

DAY_TEMPLATE = "day.py.j2"


def solution_path(solutions_dir: Path, year: int, day: int) -> Path:
    return solutions_dir / str(year) / f"day{day:02d}.py"


def create_year(solutions_dir: Path, year: int) -> Path:
    year_dir = solutions_dir / str(year)
    ensure_dir(year_dir / "Inputs")
    logger.info("Created directory structure for year %d", year)
    return year_dir


def render_day(template_dir: Path, year: int, day: int) -> str:
    env = Environment(loader=FileSystemLoader(template_dir), keep_trailing_newline=True)
    return env.get_template(DAY_TEMPLATE).render(year=year, day=day)


def create_day(
    solutions_dir: Path,
    year: int,
    day: int,
    template_dir: Path,
    force: bool = False,
) -> List[Path]:
    """Create the input folder, empty input files and the solution module.

    Input files are never overwritten. The solution module is only replaced
    when ``force`` is set. Returns the paths that were written.
    """
    create_year(solutions_dir, year)
    input_dir = inputs_dir(solutions_dir, year, day)
    ensure_dir(input_dir)

    created: List[Path] = []
    for name in [TEST_INPUTS[1], TEST_INPUTS[2], PRODUCTION_INPUT]:
        path = input_dir / name
        if not path.exists():
            path.touch()
            created.append(path)

    target = solution_path(solutions_dir, year, day)
    if target.exists() and not force:
        logger.warning("%s already exists, skipping", target)
    else:
        target.write_text(render_day(template_dir, year, day), encoding="utf-8")
        created.append(target)
    return created
