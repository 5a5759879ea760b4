import os
from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return float(raw)


class Settings:
    HEALTHAGG_TARGETS_PATH: str = os.getenv("HEALTHAGG_TARGETS_PATH", "targets.yml")
    HEALTHAGG_TIMEOUT_SECONDS: float | None = _optional_float("HEALTHAGG_TIMEOUT_SECONDS")
    HEALTHAGG_LOG_LEVEL: str = os.getenv("HEALTHAGG_LOG_LEVEL", "INFO")


settings = Settings()
