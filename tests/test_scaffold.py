from pathlib import Path

from aocrun.config import PACKAGE_TEMPLATES
from aocrun.registry import SolverRegistry
from aocrun.scaffold import create_day, create_year, render_day, solution_path


def test_create_year(tmp_path: Path):
    year_dir = create_year(tmp_path, 2024)
    assert (year_dir / "Inputs").is_dir()


def test_create_day_layout(tmp_path: Path):
    created = create_day(tmp_path, 2024, 5, PACKAGE_TEMPLATES)

    inputs = tmp_path / "2024" / "Inputs" / "05"
    for name in ["TestInputPart1.txt", "TestInputPart2.txt", "Input.txt"]:
        assert (inputs / name).is_file()
    target = solution_path(tmp_path, 2024, 5)
    assert target in created
    assert "class Day05(BaseDay)" in target.read_text(encoding="utf-8")


def test_create_day_keeps_existing_files(tmp_path: Path):
    create_day(tmp_path, 2024, 5, PACKAGE_TEMPLATES)
    inputs = tmp_path / "2024" / "Inputs" / "05"
    (inputs / "Input.txt").write_text("data", encoding="utf-8")
    target = solution_path(tmp_path, 2024, 5)
    target.write_text("# mine\n", encoding="utf-8")

    created = create_day(tmp_path, 2024, 5, PACKAGE_TEMPLATES)
    assert created == []
    assert (inputs / "Input.txt").read_text(encoding="utf-8") == "data"
    assert target.read_text(encoding="utf-8") == "# mine\n"

    created = create_day(tmp_path, 2024, 5, PACKAGE_TEMPLATES, force=True)
    assert created == [target]
    assert "Day05" in target.read_text(encoding="utf-8")


def test_generated_solution_is_discoverable(tmp_path: Path):
    create_day(tmp_path, 2021, 9, PACKAGE_TEMPLATES)
    registry = SolverRegistry()
    assert registry.discover(tmp_path) == 1
    assert registry.find_one(2021, 9).name == "Day09"


def test_render_day():
    text = render_day(PACKAGE_TEMPLATES, 2020, 1)
    assert "@solver(2020)" in text
    assert text.endswith("\n")
