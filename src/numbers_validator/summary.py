"""Human-readable Markdown summary of a check report."""

from __future__ import annotations

import json
from typing import Any


def _escape(text: str) -> str:
    return text.replace("|", "\\|").replace("\r\n", "<br>").replace("\n", "<br>")


def _cell(value: Any) -> str:
    return _escape(json.dumps(value))


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of checks."""
    totals = report.get("totals", {})
    checks = report.get("checks", [])

    lines = []
    lines.append("# numbers-validator Summary")
    lines.append("")
    lines.append(
        f"Total checks: {totals.get('checks', 0)} | OK: {totals.get('ok', 0)}"
        f" | Errors: {totals.get('errors', 0)}"
    )
    lines.append("")
    lines.append("| Operation | Input | Status | Result |")
    lines.append("| --- | --- | --- | --- |")

    for check in checks:
        operation = check.get("operation", "")
        status = check.get("status", "")
        if status == "ok":
            result = _cell(check.get("output"))
        else:
            result = _escape(str(check.get("error", "")))
        lines.append(f"| {operation} | {_cell(check.get('input'))} | {status} | {result} |")

    if not checks:
        lines.append("| (no checks run) | n/a | n/a | n/a |")

    return "\n".join(lines) + "\n"
