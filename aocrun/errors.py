from __future__ import annotations

from pathlib import Path


class AocRunError(Exception):
    """Base class for harness errors. The message is meant for direct display."""


class ConfigError(AocRunError):
    pass


class SolverNotFound(AocRunError):
    def __init__(self, year: int, day: int):
        self.year = year
        self.day = day
        super().__init__(
            f"No solver found for Year {year}, Day {day}.\n"
            f"Expected class: Day{day:02d} registered for {year}\n"
            f"Run 'aocrun create {year} {day}' to generate the boilerplate."
        )


class InputNotFound(AocRunError):
    """An input file is missing. ``report`` holds the rows run before it, if any."""

    def __init__(self, path: Path):
        self.path = path
        self.report = None
        super().__init__(f"Input file not found: {path}")


class SolverFailed(AocRunError):
    """A solver unit raised while being prepared or run."""

    def __init__(self, year: int, day: int, part: int, cause: BaseException):
        self.year = year
        self.day = day
        self.part = part
        self.cause = cause
        detail = str(cause) or type(cause).__name__
        super().__init__(f"{self.label()} failed: {detail}")

    def label(self) -> str:
        return "Run"


class SetupFailed(SolverFailed):
    def label(self) -> str:
        return "Setup"


class OperationFailed(SolverFailed):
    def label(self) -> str:
        return f"Part {self.part}"
