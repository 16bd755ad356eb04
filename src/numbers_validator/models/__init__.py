"""Data models for batch check runs."""

from __future__ import annotations

from .check_result import CheckResult
from .check_summary import CheckSummary

__all__ = [
    "CheckResult",
    "CheckSummary",
]
