from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Target:
    url: str

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True)
class CheckResult:
    status_code: int
    body: str = ""

    @property
    def healthy(self) -> bool:
        return self.status_code == 200
