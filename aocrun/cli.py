from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .config import Config, load_config, write_default_config
from .errors import AocRunError
from .harness import SolveRequest, solve
from .registry import get_registry
from .report import generate_report, render_table
from .scaffold import create_day, create_year
from .utils import ensure_dir

FIRST_YEAR = 2015
MIN_DAY = 1
MAX_DAY = 25

app = typer.Typer(
    no_args_is_help=True,
    help="Advent of Code solver - create and solve puzzles.",
)


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")):
    setup_logging(debug)


def get_config() -> Config:
    try:
        return load_config()
    except AocRunError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def validate_year(year: int) -> int:
    last = datetime.now().year + 1
    if year < FIRST_YEAR or year > last:
        raise typer.BadParameter(f"Year must be between {FIRST_YEAR} and {last}.")
    return year


def validate_day(day: Optional[int]) -> Optional[int]:
    if day is not None and (day < MIN_DAY or day > MAX_DAY):
        raise typer.BadParameter(f"Day must be between {MIN_DAY} and {MAX_DAY}")
    return day


def validate_part(part: Optional[int]) -> Optional[int]:
    if part is not None and part not in (1, 2):
        raise typer.BadParameter("Part must be 1 or 2.")
    return part


@app.command()
def init(force: bool = typer.Option(False, "--force", help="Overwrite existing config")):
    """Write a default config.yaml and the solutions directory."""
    config = get_config()
    ensure_dir(config.solutions_dir)
    cfg_path = Path.cwd() / "config.yaml"
    if force or not cfg_path.exists():
        write_default_config(cfg_path)
    typer.echo(f"Initialized {config.solutions_dir}")


@app.command("solve")
def solve_cmd(
    year: int = typer.Argument(..., callback=validate_year, help="The Advent of Code year"),
    day: Optional[int] = typer.Argument(None, callback=validate_day, help="The day (1-25, optional)"),
    test: bool = typer.Option(False, "--test", "-t", help="Use test input instead of actual input"),
    part: Optional[int] = typer.Option(None, "--part", "-p", callback=validate_part, help="Run only part 1 or 2"),
    report_dir: Optional[Path] = typer.Option(None, "--report-dir", help="Also write a report to this directory"),
):
    """Run solutions for the specified year/day."""
    config = get_config()
    use_test = test or config.default_test

    registry = get_registry()
    registry.discover(config.solutions_dir)

    request = SolveRequest(year=year, day=day, use_test=use_test, part=part)
    try:
        report = solve(request, registry, config.solutions_dir)
    except AocRunError as exc:
        partial = getattr(exc, "report", None)
        if partial is not None and partial.rows:
            render_table(partial, Console())
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    render_table(report, Console())
    if report_dir is not None:
        generate_report(report, report_dir, config.template_dir)
        typer.echo(f"Report generated in {report_dir}")


@app.command()
def create(
    year: int = typer.Argument(..., callback=validate_year, help="The Advent of Code year"),
    day: Optional[int] = typer.Argument(None, callback=validate_day, help="The day (1-25, optional)"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing solution file"),
):
    """Initialize folders and boilerplate files for a given year/day."""
    config = get_config()
    if day is None:
        create_year(config.solutions_dir, year)
        typer.echo(f"Created structure for year {year}")
        return

    create_day(config.solutions_dir, year, day, config.template_dir, force=force)
    typer.echo(f"Created structure for {year} Day {day:02d}")
    typer.echo(f"  Solution file: {year}/day{day:02d}.py")
    typer.echo(f"  Input folder: {year}/Inputs/{day:02d}/")
