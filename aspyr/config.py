from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_OPENAI_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_OPENAI_MODEL = "gpt-3.5-turbo"
PLACEHOLDER_KEYS = {"YOUR_OPENAI_API_KEY_HERE"}


@dataclass(frozen=True)
class Settings:
    openai_api_key: str | None = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    openai_url: str = DEFAULT_OPENAI_URL
    job_stats_url: str | None = None
    request_timeout: float = 12.0
    horizon_months: int = 12
    log_level: str = "INFO"

    @property
    def generation_enabled(self) -> bool:
        return bool(self.openai_api_key)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _number(raw: str | None, default, cast):
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    api_key = _clean(env.get("OPENAI_API_KEY"))
    if api_key in PLACEHOLDER_KEYS:
        api_key = None
    return Settings(
        openai_api_key=api_key,
        openai_model=_clean(env.get("OPENAI_MODEL")) or DEFAULT_OPENAI_MODEL,
        openai_url=_clean(env.get("OPENAI_API_URL")) or DEFAULT_OPENAI_URL,
        job_stats_url=_clean(env.get("JOB_STATS_URL")),
        request_timeout=_number(env.get("ASPYR_REQUEST_TIMEOUT"), 12.0, float),
        horizon_months=_number(env.get("ASPYR_HORIZON_MONTHS"), 12, int),
        log_level=(_clean(env.get("LOG_LEVEL")) or "INFO").upper(),
    )


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or load_settings()
    level = getattr(logging, settings.log_level, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
