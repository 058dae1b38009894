# evento_api/infrastructure/logging_config.py
from __future__ import annotations

import logging
import sys

from evento_api.infrastructure.config import get_settings

_FORMATO = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    """Configura o root logger uma unica vez, no nivel de API_LOG_LEVEL."""
    level = getattr(logging, get_settings().log_level, logging.INFO)
    logging.basicConfig(level=level, format=_FORMATO, stream=sys.stdout)
    logging.getLogger("evento_api").setLevel(level)
