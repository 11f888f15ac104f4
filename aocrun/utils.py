from __future__ import annotations

from pathlib import Path

PRODUCTION_INPUT = "Input.txt"
TEST_INPUTS = {1: "TestInputPart1.txt", 2: "TestInputPart2.txt"}


def input_filename(use_test: bool, part: int) -> str:
    if not use_test:
        return PRODUCTION_INPUT
    try:
        return TEST_INPUTS[part]
    except KeyError:
        raise ValueError(f"Part must be 1 or 2, got {part}") from None


def inputs_dir(solutions_dir: Path, year: int, day: int) -> Path:
    return solutions_dir / str(year) / "Inputs" / f"{day:02d}"


def input_path_for(solutions_dir: Path, year: int, day: int, use_test: bool, part: int) -> Path:
    """``<solutions_dir>/<year>/Inputs/<DD>/<Input.txt | TestInputPartN.txt>``"""
    return inputs_dir(solutions_dir, year, day) / input_filename(use_test, part)


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def format_ms(value: float | None) -> str:
    if value is None:
        return "-"
    if value >= 1000:
        return f"{value / 1000:.3f} s"
    return f"{value:.3f} ms"
