from __future__ import annotations

from pathlib import Path
import yaml

from healthagg.config import settings
from healthagg.models import Registry
from healthagg.results import Target


def load_registry(path: Path | str | None = None) -> Registry:
    path = Path(path or settings.HEALTHAGG_TARGETS_PATH)
    if not path.exists():
        raise FileNotFoundError(f"Missing targets file at {path}")

    data = yaml.safe_load(path.read_text()) or {}
    reg = Registry.model_validate(data)

    # Ensure unique URLs
    seen = set()
    for t in reg.targets:
        url = str(t.url)
        if url in seen:
            raise ValueError(f"Duplicate target url: {url}")
        seen.add(url)

    return reg


def to_targets(reg: Registry) -> list[Target]:
    return [Target(url=str(t.url)) for t in reg.targets]
