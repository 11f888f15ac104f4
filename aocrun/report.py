from __future__ import annotations

import json
from pathlib import Path
from typing import List

import plotly.graph_objects as go
from jinja2 import Environment, FileSystemLoader, select_autoescape
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import OperationOutcome, ReportRow, SolverRunReport
from .utils import ensure_dir, format_ms


class ResultAggregator:
    """Collects outcomes in the order they are recorded."""

    def __init__(self, year: int, mode: str = "year"):
        if mode not in {"day", "year"}:
            raise ValueError(f"Unknown report mode: {mode}")
        self.year = year
        self.mode = mode
        self._rows: List[ReportRow] = []
        self._total_ms = 0.0

    def record(self, year: int, day: int, outcome: OperationOutcome) -> None:
        self._rows.append(ReportRow(year=year, day=day, outcome=outcome))
        if outcome.ok and outcome.elapsed_ms is not None:
            self._total_ms += outcome.elapsed_ms

    def finalize(self) -> SolverRunReport:
        return SolverRunReport(
            year=self.year,
            mode=self.mode,
            rows=list(self._rows),
            total_ms=self._total_ms,
        )


def build_table(report: SolverRunReport) -> Table:
    if report.mode == "day" and report.rows:
        title = f"Advent of Code {report.year} - Day {report.rows[0].day:02d}"
    else:
        title = f"Advent of Code {report.year} - All Days"

    table = Table(title=title, show_footer=bool(report.rows))
    table.add_column("Day", justify="right", footer="Total")
    table.add_column("Part", justify="right")
    table.add_column("Result", overflow="fold")
    table.add_column("Time", justify="right", footer=format_ms(report.total_ms))

    for index, (day, rows) in enumerate(report.by_solver()):
        if index:
            table.add_section()
        for row in rows:
            outcome = row.outcome
            if outcome.ok:
                result = f"[cyan]{escape(outcome.result)}[/cyan]"
            else:
                result = f"[red]{escape(outcome.error)}[/red]"
            table.add_row(f"{day:02d}", str(row.part), result, format_ms(outcome.elapsed_ms))
    return table


def render_table(report: SolverRunReport, console: Console | None = None) -> None:
    console = console or Console()
    if not report.rows:
        console.print(f"[yellow]No results for year {report.year}[/yellow]")
        return
    console.print(build_table(report))


def _env(template_dir: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_timings_html(report: SolverRunReport) -> str:
    fig = go.Figure()
    for part in (1, 2):
        rows = [r for r in report.rows if r.part == part and r.outcome.ok]
        if not rows:
            continue
        fig.add_trace(
            go.Bar(
                x=[f"Day {r.day:02d}" for r in rows],
                y=[r.elapsed_ms for r in rows],
                name=f"Part {part}",
            )
        )
    fig.update_layout(
        title="Timings",
        barmode="group",
        xaxis_title="Day",
        yaxis_title="Time (ms)",
        template="plotly_white",
        height=420,
    )
    return fig.to_html(include_plotlyjs="inline", full_html=False)


def generate_report(report: SolverRunReport, out_dir: Path, template_dir: Path) -> None:
    env = _env(template_dir)
    html_template = env.get_template("report.html")
    md_template = env.get_template("report.md")

    ensure_dir(out_dir)

    groups = report.by_solver()
    html = html_template.render(
        report=report,
        groups=groups,
        timings_html=render_timings_html(report),
        format_ms=format_ms,
    )
    (out_dir / "index.html").write_text(html, encoding="utf-8")

    md = md_template.render(report=report, groups=groups, format_ms=format_ms)
    (out_dir / "report.md").write_text(md, encoding="utf-8")

    (out_dir / "report.json").write_text(json.dumps(report.as_dict(), indent=2), encoding="utf-8")
