"""
Solver registry: the lookup table from ``(year, name)`` to a solution factory.

Solutions register themselves with the ``solver`` decorator when their module
is imported. ``discover`` imports every solution file under the solutions
directory once so that the table is populated before lookups.
"""

from __future__ import annotations

import hashlib
import importlib.util
import logging
import re
import sys
from pathlib import Path
from typing import Callable, Dict, List, Tuple, TypeVar

from .errors import SolverNotFound
from .models import SolverHandle, SolverKey

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)

DAY_NAME_RE = re.compile(r"^Day(\d+)$")
MODULE_PREFIX = "aocrun_solutions"


def day_name(day: int) -> str:
    return f"Day{day:02d}"


def parse_day(name: str) -> int | None:
    match = DAY_NAME_RE.match(name)
    if not match:
        return None
    day = int(match.group(1))
    return day if day > 0 else None


class SolverRegistry:
    def __init__(self) -> None:
        self._entries: Dict[Tuple[int, str], Callable] = {}
        self._discovered: set[Path] = set()

    def __len__(self) -> int:
        return len(self._entries)

    def register(self, year: int, name: str, factory: Callable) -> None:
        key = (int(year), name)
        day = parse_day(name)
        if key in self._entries or (day is not None and self._lookup(key[0], day) is not None):
            raise ValueError(f"Solver {name} already registered for {year}")
        self._entries[key] = factory
        logger.debug("Registered solver %s %s", year, name)

    def solver(self, year: int, day: int | None = None) -> Callable[[T], T]:
        """Class decorator registering a solution for ``year``.

        The registered name is ``DayNN`` when ``day`` is given, otherwise the
        class name.
        """

        def decorator(cls: T) -> T:
            name = day_name(day) if day is not None else cls.__name__
            self.register(year, name, cls)
            return cls

        return decorator

    def reset(self) -> None:
        self._entries.clear()
        self._discovered.clear()

    def _lookup(self, year: int, day: int) -> Tuple[str, Callable] | None:
        for (entry_year, name), factory in self._entries.items():
            if entry_year == year and parse_day(name) == day:
                return name, factory
        return None

    def find_one(self, year: int, day: int) -> SolverHandle:
        found = self._lookup(year, day)
        if found is None:
            raise SolverNotFound(year, day)
        name, factory = found
        return SolverHandle(key=SolverKey(year, day), name=name, factory=factory)

    def find_all(self, year: int) -> List[SolverHandle]:
        handles: List[SolverHandle] = []
        for (entry_year, name), factory in self._entries.items():
            if entry_year != year:
                continue
            day = parse_day(name)
            if day is None:
                logger.debug("Ignoring solver %s %s: no day number in its name", year, name)
                continue
            handles.append(SolverHandle(key=SolverKey(year, day), name=name, factory=factory))
        handles.sort(key=lambda h: h.key.day)
        return handles

    def discover(self, solutions_dir: Path) -> int:
        """Import solution files ``<solutions_dir>/<year>/*.py``; returns the number loaded."""
        root = solutions_dir.resolve()
        if root in self._discovered:
            return 0
        self._discovered.add(root)

        if not root.is_dir():
            logger.warning("Solutions directory not found: %s", root)
            return 0

        prefix = f"{MODULE_PREFIX}_{hashlib.sha1(str(root).encode()).hexdigest()[:8]}"
        loaded = 0
        _loading.append(self)
        try:
            for year_dir in sorted(p for p in root.iterdir() if p.is_dir() and p.name.isdigit()):
                for path in sorted(year_dir.glob("*.py")):
                    if path.name.startswith("_"):
                        continue
                    if _load_module(path, f"{prefix}_{year_dir.name}_{path.stem}"):
                        loaded += 1
        finally:
            _loading.pop()
        logger.info("Loaded %d solution modules from %s", loaded, root)
        return loaded


def _load_module(path: Path, module_name: str) -> bool:
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        logger.error("Cannot load solution module %s", path)
        return False
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        logger.error("Failed to load solution module '%s': %s", path, exc)
        return False
    return True


registry = SolverRegistry()

# Registries currently importing solution files; decorators register there.
_loading: List[SolverRegistry] = []


def solver(year: int, day: int | None = None) -> Callable[[T], T]:
    target = _loading[-1] if _loading else registry
    return target.solver(year, day)


def get_registry() -> SolverRegistry:
    return registry
