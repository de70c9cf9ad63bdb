"""
Rate limiting usando Redis com janela fixa.

Limita requisições de escrita por IP do cliente.
Configurável via variáveis de ambiente:
    - RATE_LIMIT_ENABLED: bool (default: True) - Habilita/desabilita rate limiting
    - RATE_LIMIT_REQUESTS: int (default: 60) - Número de requests permitidos
    - RATE_LIMIT_WINDOW_SECONDS: int (default: 60) - Janela de tempo em segundos

Uso:
    @router.post("", dependencies=[Depends(rate_limit_write)])
    async def endpoint(...):
        ...
"""

import logging
from typing import Optional

from fastapi import HTTPException, Request, status

from app.core.config import get_settings
from app.db.redis import get_redis_client

logger = logging.getLogger(__name__)
settings = get_settings()


class RateLimiter:
    """
    Dependency para rate limiting usando Redis.

    Args:
        requests: Número máximo de requests permitidos (default: config)
        window: Janela de tempo em segundos (default: config)
        key_prefix: Prefixo para a chave no Redis (default: "rate_limit")
    """

    def __init__(
        self,
        requests: Optional[int] = None,
        window: Optional[int] = None,
        key_prefix: str = "rate_limit",
    ):
        self.requests = requests or settings.RATE_LIMIT_REQUESTS
        self.window = window or settings.RATE_LIMIT_WINDOW_SECONDS
        self.key_prefix = key_prefix

    async def __call__(self, request: Request) -> None:
        """
        Verifica rate limit para o IP do cliente.

        Raises:
            HTTPException 429: Rate limit excedido
        """
        if not settings.RATE_LIMIT_ENABLED:
            return

        # Se Redis não disponível, permite passagem (fail-open)
        redis_client = get_redis_client()
        if redis_client is None:
            return

        key = f"{self.key_prefix}:{self._get_identifier(request)}"

        try:
            current = await redis_client.incr(key)

            # Primeiro request da janela define o TTL
            if current == 1:
                await redis_client.expire(key, self.window)

            if current > self.requests:
                ttl = await redis_client.ttl(key)
                raise HTTPException(
                    status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                    detail=f"Rate limit excedido. Tente novamente em {ttl} segundos.",
                    headers={"Retry-After": str(ttl)},
                )
        except HTTPException:
            raise
        except Exception as e:
            # Em caso de erro no Redis, permite passagem (fail-open)
            logger.warning(f"Rate limit indisponível: {e}")

    def _get_identifier(self, request: Request) -> str:
        """IP do cliente, priorizando o primeiro hop de X-Forwarded-For."""
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return f"ip:{forwarded.split(',')[0].strip()}"

        client_ip = request.client.host if request.client else "unknown"
        return f"ip:{client_ip}"


# Instância usada nos endpoints de escrita (POST/PUT/DELETE)
rate_limit_write = RateLimiter(key_prefix="rate_limit:write")
