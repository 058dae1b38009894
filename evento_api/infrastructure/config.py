# evento_api/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _lista(raw: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    rate_limit_per_minute: int
    debug: bool
    log_level: str
    cors_origins: tuple[str, ...]
    api_keys: frozenset[str]  # chaves de servicos internos isentas do rate limit


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "60")),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
        log_level=os.environ.get("API_LOG_LEVEL", "INFO").upper(),
        cors_origins=_lista(os.environ.get("API_CORS_ORIGINS", "http://localhost:5173")),
        api_keys=frozenset(_lista(os.environ.get("API_KEYS", ""))),
    )
