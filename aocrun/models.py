from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Tuple

if TYPE_CHECKING:
    from .base import BaseDay

PARTS = (1, 2)


def check_part(part: int) -> int:
    if part not in PARTS:
        raise ValueError(f"Part must be 1 or 2, got {part}")
    return part


@dataclass(frozen=True)
class SolverKey:
    year: int
    day: int

    def __str__(self) -> str:
        return f"{self.year} Day {self.day:02d}"


@dataclass(frozen=True)
class SolverHandle:
    key: SolverKey
    name: str
    factory: Callable[[], "BaseDay"]

    def create(self) -> "BaseDay":
        return self.factory()


@dataclass(frozen=True)
class OperationOutcome:
    part: int
    result: str | None = None
    elapsed_ms: float | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        check_part(self.part)

    @classmethod
    def success(cls, part: int, result: str, elapsed_ms: float) -> "OperationOutcome":
        return cls(part=part, result=result, elapsed_ms=elapsed_ms)

    @classmethod
    def failure(cls, part: int, reason: str) -> "OperationOutcome":
        return cls(part=part, error=reason)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ReportRow:
    year: int
    day: int
    outcome: OperationOutcome

    @property
    def part(self) -> int:
        return self.outcome.part

    @property
    def status(self) -> str:
        return "ok" if self.outcome.ok else "error"

    @property
    def elapsed_ms(self) -> float | None:
        return self.outcome.elapsed_ms

    def as_dict(self) -> Dict[str, Any]:
        row: Dict[str, Any] = {"year": self.year, "day": self.day, "part": self.part, "status": self.status}
        if self.outcome.ok:
            row["result"] = self.outcome.result
        else:
            row["error"] = self.outcome.error
        row["elapsed_ms"] = self.outcome.elapsed_ms
        return row


@dataclass
class SolverRunReport:
    year: int
    mode: str
    rows: List[ReportRow] = field(default_factory=list)
    total_ms: float = 0.0

    @property
    def failures(self) -> int:
        return sum(1 for row in self.rows if not row.outcome.ok)

    def by_solver(self) -> List[Tuple[int, List[ReportRow]]]:
        groups: List[Tuple[int, List[ReportRow]]] = []
        for row in self.rows:
            if groups and groups[-1][0] == row.day:
                groups[-1][1].append(row)
            else:
                groups.append((row.day, [row]))
        return groups

    def as_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "mode": self.mode,
            "total_ms": self.total_ms,
            "failures": self.failures,
            "rows": [row.as_dict() for row in self.rows],
        }
