from __future__ import annotations

import asyncio
from functools import partial
from typing import Callable, Awaitable

import requests

from healthagg.results import CheckResult, Target


def _get(url: str, timeout_s: float, connect_timeout_s: float | None) -> CheckResult:
    connect_timeout = timeout_s if connect_timeout_s is None else connect_timeout_s
    r = requests.get(url, timeout=(connect_timeout, timeout_s))
    return CheckResult(status_code=r.status_code, body=r.text)


async def run_http(
    target: Target | str,
    timeout_s: float,
    connect_timeout_s: float | None = None,
) -> CheckResult:
    # requests is blocking; keep it off the event loop so checks overlap.
    return await asyncio.to_thread(_get, str(target), timeout_s, connect_timeout_s)


def make_http_check(
    timeout_s: float,
    connect_timeout_s: float | None = None,
) -> Callable[[Target | str], Awaitable[CheckResult]]:
    return partial(run_http, timeout_s=timeout_s, connect_timeout_s=connect_timeout_s)
