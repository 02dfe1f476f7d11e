from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterator

from svccheck.checks.results import CheckResult
from svccheck.checks.tcp_check import run_tcp

logger = logging.getLogger(__name__)

CheckFn = Callable[[str, float], CheckResult]


def parse_endpoints(raw: str) -> list[str]:
    return [token.strip() for token in (raw or "").split(",") if token.strip()]


class Prober:
    """
    Run one check per endpoint, all at once, and hand results back as
    they complete. The executor is scoped to a single iter_results() call
    and leaving it waits for every check.

    Results come back in completion order, not input order.
    """

    def __init__(self, timeout_s: float, check: CheckFn | None = None) -> None:
        self.timeout_s = timeout_s
        self._check = check or run_tcp

    def iter_results(self, endpoints: list[str]) -> Iterator[CheckResult]:
        if not endpoints:
            return

        logger.info(
            "Checking %d endpoint(s) with %ss timeout", len(endpoints), self.timeout_s
        )
        start = time.perf_counter()
        with ThreadPoolExecutor(
            max_workers=len(endpoints), thread_name_prefix="svccheck"
        ) as executor:
            futures = {
                executor.submit(self._check, address, self.timeout_s): address
                for address in endpoints
            }
            for future in as_completed(futures):
                address = futures[future]
                try:
                    res = future.result()
                except Exception as e:
                    logger.exception("Check for %s raised", address)
                    res = CheckResult(
                        address=address,
                        available=False,
                        duration_s=time.perf_counter() - start,
                        error=str(e) or e.__class__.__name__,
                    )
                yield res

    def run(self, endpoints: list[str]) -> list[CheckResult]:
        return list(self.iter_results(endpoints))


def probe(
    endpoints: list[str], timeout_s: float, check: CheckFn | None = None
) -> Iterator[CheckResult]:
    return Prober(timeout_s, check=check).iter_results(endpoints)
