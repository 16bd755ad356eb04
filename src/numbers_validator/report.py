"""Report aggregation and JSON-friendly output."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .models import CheckResult, CheckSummary


def aggregate(results: Iterable[CheckResult]) -> dict[str, Any]:
    """Aggregate per-check results into a single report.

    Computes totals and the top-level ``hasErrors`` flag and passes the
    serialised checks through in run order.
    """

    results = list(results)
    summary = CheckSummary.from_results(results)

    report: dict[str, Any] = {
        "version": "1",
        "hasErrors": summary.has_errors,
        "checks": [result.to_dict() for result in results],
        "totals": summary.to_dict(),
    }

    return report
