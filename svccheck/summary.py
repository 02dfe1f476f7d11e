from __future__ import annotations

from dataclasses import dataclass, replace

from svccheck.checks.results import CheckResult


@dataclass(frozen=True)
class Summary:
    total_checked: int = 0
    unavailable_count: int = 0

    @classmethod
    def empty(cls) -> "Summary":
        return cls()

    def add(self, res: CheckResult) -> "Summary":
        return replace(
            self,
            total_checked=self.total_checked + 1,
            unavailable_count=self.unavailable_count + (0 if res.available else 1),
        )

    @property
    def available_count(self) -> int:
        return self.total_checked - self.unavailable_count

    @property
    def exit_code(self) -> int:
        return 1 if self.unavailable_count > 0 else 0
