"""Totals across a batch of check results."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable

from .check_result import CheckResult


@dataclass(frozen=True)
class CheckSummary:
    """Describe how many checks ran and how many were rejected."""

    total: int
    ok: int
    errors: int

    def __post_init__(self) -> None:
        if self.total < 0 or self.ok < 0 or self.errors < 0:
            raise ValueError("Counts must be non-negative")
        if self.ok + self.errors != self.total:
            raise ValueError("ok and errors must add up to total")

    @property
    def has_errors(self) -> bool:
        return self.errors > 0

    def to_dict(self) -> dict[str, int]:
        return {
            "checks": self.total,
            "ok": self.ok,
            "errors": self.errors,
        }

    @classmethod
    def from_results(cls, results: Iterable[CheckResult]) -> CheckSummary:
        results = list(results)
        ok = sum(1 for result in results if result.ok)
        return cls(total=len(results), ok=ok, errors=len(results) - ok)
