# evento_pipeline/log.py
#
# Logger do pipeline com tempo decorrido.
#
# Escreve direto em stdout com flush para o operador acompanhar cada fase
# de um job em lote.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def log(message: str) -> None:
    """Write a timestamped log line to stdout."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[cadastros {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
