"""Check result model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_VALID_STATUSES = {"ok", "error"}


@dataclass(frozen=True)
class CheckResult:
    """Outcome of running one operation against one input value."""

    operation: str
    input: Any
    status: str
    output: Any = None
    error: str | None = None

    def __post_init__(self) -> None:
        if not self.operation:
            raise ValueError("Operation must be non-empty")
        if self.status not in _VALID_STATUSES:
            raise ValueError(f"Invalid status: {self.status}")
        if self.status == "ok" and self.error is not None:
            raise ValueError("Successful result must not carry an error")
        if self.status == "error" and not self.error:
            raise ValueError("Failed result must carry an error message")

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "operation": self.operation,
            "input": self.input,
            "status": self.status,
        }
        if self.ok:
            data["output"] = self.output
        else:
            data["error"] = self.error
        return data

    @classmethod
    def success(cls, operation: str, value: Any, output: Any) -> CheckResult:
        return cls(operation=operation, input=value, status="ok", output=output)

    @classmethod
    def failure(cls, operation: str, value: Any, error: str) -> CheckResult:
        return cls(operation=operation, input=value, status="error", error=error)
