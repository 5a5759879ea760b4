from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Hashable, Iterable, Sequence, Union

from healthagg.results import CheckResult

logger = logging.getLogger(__name__)

CheckFn = Callable[[Any], Union[CheckResult, Awaitable[CheckResult]]]


class CheckFailure(RuntimeError):
    """A single check raised or did not finish before the deadline.

    This means the health of the batch is unknown, which is not the same
    thing as a ``False`` verdict.
    """

    def __init__(self, target: Hashable, cause: BaseException) -> None:
        self.target = target
        self.cause = cause
        super().__init__(
            f"Health check for {target!s} failed: {cause.__class__.__name__}: {cause}"
        )


def _validate_timeout(timeout_s: float) -> None:
    if timeout_s <= 0:
        raise ValueError(f"timeout_s must be positive, got {timeout_s}")


def reduce_results(results: Iterable[CheckResult]) -> bool:
    return all(r.healthy for r in results)


async def _resolve(target: Hashable, pending: Awaitable[CheckResult] | CheckResult) -> CheckResult:
    try:
        if inspect.isawaitable(pending):
            return await pending
        return pending
    except Exception as exc:
        raise CheckFailure(target, exc) from exc


async def _call_check(check: CheckFn, target: Hashable) -> CheckResult:
    try:
        pending = check(target)
    except Exception as exc:
        raise CheckFailure(target, exc) from exc
    return await _resolve(target, pending)


async def _join(
    labelled: Sequence[tuple[Hashable, Awaitable[CheckResult]]],
    timeout_s: float,
) -> list[CheckResult]:
    """Run every awaitable as its own task and wait for all of them.

    Either every task produces a result (returned in input order) or exactly
    one CheckFailure is raised and the rest are cancelled.
    """
    tasks = [asyncio.ensure_future(aw) for _, aw in labelled]
    try:
        await asyncio.wait(
            tasks, timeout=timeout_s, return_when=asyncio.FIRST_EXCEPTION
        )

        # Tasks are only cancelled below, so a cancelled task here was
        # cancelled from inside its own check.
        failed = [
            (target, t)
            for (target, _), t in zip(labelled, tasks)
            if t.done() and (t.cancelled() or t.exception() is not None)
        ]
        if failed:
            target, task = failed[0]
            if task.cancelled():
                cause = asyncio.CancelledError()
                logger.warning("Health check for %s was cancelled", target)
                raise CheckFailure(target, cause) from cause
            logger.warning("%s", task.exception())
            raise task.exception()

        for (target, _), task in zip(labelled, tasks):
            if not task.done():
                cause = TimeoutError(f"no result within {timeout_s}s")
                logger.warning("Health check for %s timed out after %ss", target, timeout_s)
                raise CheckFailure(target, cause) from cause

        return [t.result() for t in tasks]
    finally:
        for t in tasks:
            if not t.done():
                t.cancel()


async def check_all(
    targets: Iterable[Hashable],
    check: CheckFn,
    timeout_s: float,
) -> bool:
    _validate_timeout(timeout_s)
    targets = list(targets)
    if not targets:
        return True

    logger.debug("Checking %d targets concurrently (deadline %ss)", len(targets), timeout_s)
    results = await _join([(t, _call_check(check, t)) for t in targets], timeout_s)
    return reduce_results(results)


async def check_results(
    pending: Sequence[Awaitable[CheckResult]],
    timeout_s: float,
) -> bool:
    """Await already-started checks together and reduce them.

    Failures are reported against the index of the offending awaitable.
    Coroutines in ``pending`` are closed if the timeout is rejected; futures
    stay with the caller.
    """
    try:
        _validate_timeout(timeout_s)
    except ValueError:
        for aw in pending:
            if inspect.iscoroutine(aw):
                aw.close()
        raise
    if not pending:
        return True
    labelled = [(i, _resolve(i, aw)) for i, aw in enumerate(pending)]
    return reduce_results(await _join(labelled, timeout_s))


def check_all_sync(
    targets: Iterable[Hashable],
    check: CheckFn,
    timeout_s: float,
) -> bool:
    return asyncio.run(check_all(targets, check, timeout_s))
