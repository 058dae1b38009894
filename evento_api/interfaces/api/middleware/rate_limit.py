# evento_api/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from evento_api.infrastructure.config import get_settings

logger = logging.getLogger(__name__)

_JANELA_SEGUNDOS = 60.0


class JanelaPorCliente:
    """Janela deslizante de requisicoes por IP.

    Invariante: nenhum IP fica no mapa sem requisicao dentro da janela, entao
    o tamanho do mapa e limitado aos clientes ativos no ultimo minuto.
    """

    def __init__(self, janela: float = _JANELA_SEGUNDOS) -> None:
        self._janela = janela
        self._requests: dict[str, list[float]] = {}

    def __len__(self) -> int:
        return len(self._requests)

    def __contains__(self, client_ip: object) -> bool:
        return client_ip in self._requests

    def registrar(self, client_ip: str, limite: int, now: float) -> bool:
        """Registra a requisicao se couber no limite. False quando excedido."""
        self._expirar(now)
        recentes = self._requests.setdefault(client_ip, [])
        if len(recentes) >= limite:
            return False
        recentes.append(now)
        return True

    def _expirar(self, now: float) -> None:
        for ip in list(self._requests):
            recentes = [t for t in self._requests[ip] if now - t < self._janela]
            if recentes:
                self._requests[ip] = recentes
            else:
                del self._requests[ip]


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Limite por IP por minuto. Limite 0 desliga o controle."""

    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self.janela = JanelaPorCliente()

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        settings = get_settings()
        if settings.rate_limit_per_minute == 0:
            return await call_next(request)

        # Somente chaves configuradas em API_KEYS ficam isentas
        if request.headers.get("X-API-Key") in settings.api_keys:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        if not self.janela.registrar(client_ip, settings.rate_limit_per_minute, time.monotonic()):
            logger.warning("Rate limit excedido para %s", client_ip)
            return Response(
                content='{"detail": "Rate limit excedido. Tente novamente em 1 minuto."}',
                status_code=429,
                media_type="application/json",
            )
        return await call_next(request)
