from __future__ import annotations

import logging
from pathlib import Path

from healthagg.aggregator import CheckFailure, check_all_sync
from healthagg.checks.http_check import make_http_check
from healthagg.config import settings
from healthagg.logging_utils import configure_logging
from healthagg.registry import load_registry, to_targets

logger = logging.getLogger(__name__)


def _deadline(timeout_s: float) -> float:
    if settings.HEALTHAGG_TIMEOUT_SECONDS is not None:
        return settings.HEALTHAGG_TIMEOUT_SECONDS
    return timeout_s


def run_once(path: Path | str | None = None) -> bool:
    reg = load_registry(path)
    targets = to_targets(reg)
    d = reg.defaults

    check = make_http_check(timeout_s=d.timeout_s, connect_timeout_s=d.connect_timeout_s)
    verdict = check_all_sync(targets, check, timeout_s=_deadline(d.timeout_s))

    logger.info(
        "Checked %d targets: %s", len(targets), "healthy" if verdict else "unhealthy"
    )
    return verdict


def main() -> int:
    """Exit 0 when healthy, 1 when unhealthy, 2 when health is unknown."""
    configure_logging()
    try:
        return 0 if run_once() else 1
    except CheckFailure as exc:
        logger.error("Health unknown: %s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
