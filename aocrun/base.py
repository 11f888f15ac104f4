"""
Base class for puzzle solutions.

A solution subclasses ``BaseDay``, implements ``setup`` to parse its input and
overrides ``part1`` / ``part2``. The harness attaches the input file before
calling ``setup``, so ``input_path`` is always valid inside it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from .errors import InputNotFound


class BaseDay(ABC):
    def __init__(self) -> None:
        self._input_path: Path | None = None

    @property
    def input_path(self) -> Path:
        if self._input_path is None:
            raise RuntimeError("input_path has not been initialized. Call set_input_path() first.")
        return self._input_path

    def set_input_path(self, path: Path | str) -> None:
        if not str(path).strip():
            raise ValueError("Input path cannot be empty.")
        path = Path(path)
        if not path.is_file():
            raise InputNotFound(path)
        self._input_path = path

    def read_text(self) -> str:
        return self.input_path.read_text(encoding="utf-8")

    def read_lines(self) -> list[str]:
        return self.read_text().splitlines()

    @abstractmethod
    def setup(self) -> None:
        ...

    def part1(self) -> Any:
        return "0"

    def part2(self) -> Any:
        return "0"
