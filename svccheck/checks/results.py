from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckResult:
    address: str
    available: bool
    duration_s: float
    error: str | None = None
