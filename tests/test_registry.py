from pathlib import Path

import pytest

from aocrun.base import BaseDay
from aocrun.errors import SolverNotFound
from aocrun.registry import SolverRegistry, parse_day


class Stub(BaseDay):
    def setup(self) -> None:
        pass


def _registry(*entries) -> SolverRegistry:
    registry = SolverRegistry()
    for year, name in entries:
        registry.register(year, name, Stub)
    return registry


def test_find_one_matches_key():
    registry = _registry((2024, "Day01"), (2024, "Day02"), (2023, "Day01"))
    handle = registry.find_one(2024, 2)
    assert handle.key.year == 2024
    assert handle.key.day == 2
    assert handle.name == "Day02"
    assert isinstance(handle.create(), Stub)


def test_find_one_missing_raises():
    registry = _registry((2024, "Day01"))
    with pytest.raises(SolverNotFound) as info:
        registry.find_one(2024, 3)
    assert info.value.year == 2024
    assert info.value.day == 3
    assert "aocrun create 2024 3" in str(info.value)


def test_find_all_sorted_and_filters_malformed():
    registry = _registry(
        (2024, "Day10"),
        (2024, "Day02"),
        (2024, "DayX"),
        (2024, "Helper"),
        (2024, "Day00"),
        (2024, "Day01"),
        (2023, "Day05"),
    )
    days = [h.key.day for h in registry.find_all(2024)]
    assert days == [1, 2, 10]


def test_find_all_empty_group():
    assert _registry().find_all(2024) == []
    assert _registry((2023, "Day01")).find_all(2024) == []


def test_duplicate_registration_rejected():
    registry = _registry((2024, "Day01"))
    with pytest.raises(ValueError):
        registry.register(2024, "Day01", Stub)
    with pytest.raises(ValueError):
        registry.register(2024, "Day1", Stub)
    registry.register(2023, "Day1", Stub)
    assert registry.find_one(2023, 1).name == "Day1"


def test_decorator_registers_class():
    registry = SolverRegistry()

    @registry.solver(2022)
    class Day07(BaseDay):
        def setup(self) -> None:
            pass

    @registry.solver(2022, day=8)
    class Whatever(BaseDay):
        def setup(self) -> None:
            pass

    assert registry.find_one(2022, 7).factory is Day07
    assert registry.find_one(2022, 8).factory is Whatever


def test_parse_day():
    assert parse_day("Day01") == 1
    assert parse_day("Day25") == 25
    assert parse_day("Day") is None
    assert parse_day("Day00") is None
    assert parse_day("Dayone") is None


def _write_solution(root: Path, year: int, name: str, body: str) -> None:
    year_dir = root / str(year)
    year_dir.mkdir(parents=True, exist_ok=True)
    (year_dir / name).write_text(body, encoding="utf-8")


SOLUTION = (
    "from aocrun.base import BaseDay\n"
    "from aocrun.registry import solver\n"
    "\n"
    "\n"
    "@solver({year})\n"
    "class Day{day:02d}(BaseDay):\n"
    "    def setup(self):\n"
    "        pass\n"
)


def test_discover_loads_solution_files(tmp_path: Path):
    root = tmp_path / "Solutions"
    _write_solution(root, 2024, "day01.py", SOLUTION.format(year=2024, day=1))
    _write_solution(root, 2024, "day03.py", SOLUTION.format(year=2024, day=3))
    _write_solution(root, 2024, "_helpers.py", "raise RuntimeError('not a solution')\n")
    _write_solution(root, 2024, "day04.py", "raise RuntimeError('broken')\n")

    registry = SolverRegistry()
    assert registry.discover(root) == 2
    assert [h.key.day for h in registry.find_all(2024)] == [1, 3]

    # second call is a no-op
    assert registry.discover(root) == 0
    assert len(registry) == 2


def test_discover_tolerates_missing_root(tmp_path: Path):
    registry = SolverRegistry()
    assert registry.discover(tmp_path / "nope") == 0
    assert registry.find_all(2024) == []


def test_reset_allows_rediscovery(tmp_path: Path):
    root = tmp_path / "Solutions"
    _write_solution(root, 2024, "day01.py", SOLUTION.format(year=2024, day=1))

    registry = SolverRegistry()
    registry.discover(root)
    registry.reset()
    assert len(registry) == 0
    assert registry.discover(root) == 1
    assert registry.find_one(2024, 1).name == "Day01"
