from __future__ import annotations

from svccheck.checks.results import CheckResult
from svccheck.summary import Summary

HEADER = "Service Availability Check Results:"
RULE = "=================================="


def format_result(res: CheckResult) -> str:
    if res.available:
        return f"✅ {res.address} - Available ({res.duration_s:.2f} seconds)"
    return (
        f"❌ {res.address} - Unavailable: {res.error} "
        f"({res.duration_s:.2f} seconds)"
    )


def format_summary(summary: Summary) -> str:
    return (
        f"Summary: {summary.total_checked} services checked, "
        f"{summary.unavailable_count} unavailable"
    )
