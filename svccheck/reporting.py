from __future__ import annotations

import logging
import sys
from typing import Iterable, TextIO

from svccheck.checks.results import CheckResult
from svccheck.formatting import HEADER, RULE, format_result, format_summary
from svccheck.summary import Summary

logger = logging.getLogger(__name__)


def _emit(out: TextIO, line: str) -> None:
    out.write(line + "\n")
    out.flush()


def report(results: Iterable[CheckResult], out: TextIO | None = None) -> Summary:
    """
    Drain results as they arrive, printing one line per result, then the
    summary line. Returns the accumulated Summary.
    """
    out = out or sys.stdout
    summary = Summary.empty()

    _emit(out, HEADER)
    _emit(out, RULE)

    for res in results:
        summary = summary.add(res)
        _emit(out, format_result(res))

    _emit(out, RULE)
    _emit(out, format_summary(summary))

    logger.info(
        "Checked %d endpoint(s): %d available, %d unavailable",
        summary.total_checked,
        summary.available_count,
        summary.unavailable_count,
    )
    return summary
