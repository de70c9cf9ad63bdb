"""
Testes unitários para Rate Limiting.

Usa mocks para Redis para testar a lógica sem dependência externa.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import HTTPException, Request

from app.core.rate_limit import RateLimiter


@pytest.fixture
def mock_request():
    """Cria mock de Request."""
    request = MagicMock(spec=Request)
    request.client.host = "127.0.0.1"
    request.headers = {}
    return request


@pytest.fixture
def enabled_settings():
    with patch("app.core.rate_limit.settings") as mock_settings:
        mock_settings.RATE_LIMIT_ENABLED = True
        yield mock_settings


class TestRateLimiter:
    """Testes para o RateLimiter."""

    @pytest.mark.anyio
    async def test_disabled_allows_all(self, mock_request):
        """Quando rate limit está desabilitado, não consulta o Redis."""
        mock_redis = AsyncMock()

        with patch("app.core.rate_limit.settings") as mock_settings, \
             patch("app.core.rate_limit.get_redis_client", return_value=mock_redis):
            mock_settings.RATE_LIMIT_ENABLED = False
            await RateLimiter(requests=1, window=60)(mock_request)

        mock_redis.incr.assert_not_called()

    @pytest.mark.anyio
    async def test_redis_unavailable_allows_all(self, mock_request, enabled_settings):
        """Sem Redis, permite a requisição (fail-open)."""
        with patch("app.core.rate_limit.get_redis_client", return_value=None):
            await RateLimiter(requests=1, window=60)(mock_request)

    @pytest.mark.anyio
    async def test_first_request_sets_ttl(self, mock_request, enabled_settings):
        """Primeira requisição da janela define o TTL da chave."""
        mock_redis = AsyncMock()
        mock_redis.incr.return_value = 1

        with patch("app.core.rate_limit.get_redis_client", return_value=mock_redis):
            await RateLimiter(requests=5, window=60, key_prefix="rl")(mock_request)

        mock_redis.incr.assert_awaited_once_with("rl:ip:127.0.0.1")
        mock_redis.expire.assert_awaited_once_with("rl:ip:127.0.0.1", 60)

    @pytest.mark.anyio
    async def test_within_limit_does_not_reset_ttl(self, mock_request, enabled_settings):
        mock_redis = AsyncMock()
        mock_redis.incr.return_value = 3

        with patch("app.core.rate_limit.get_redis_client", return_value=mock_redis):
            await RateLimiter(requests=5, window=60)(mock_request)

        mock_redis.expire.assert_not_called()

    @pytest.mark.anyio
    async def test_exceeded_raises_429(self, mock_request, enabled_settings):
        """Quando limite é excedido, deve lançar 429 com Retry-After."""
        mock_redis = AsyncMock()
        mock_redis.incr.return_value = 6
        mock_redis.ttl.return_value = 45

        with patch("app.core.rate_limit.get_redis_client", return_value=mock_redis):
            with pytest.raises(HTTPException) as exc_info:
                await RateLimiter(requests=5, window=60)(mock_request)

        assert exc_info.value.status_code == 429
        assert exc_info.value.headers["Retry-After"] == "45"

    @pytest.mark.anyio
    async def test_redis_error_allows_request(self, mock_request, enabled_settings):
        """Erro no Redis não deve bloquear a requisição."""
        mock_redis = AsyncMock()
        mock_redis.incr.side_effect = ConnectionError("redis down")

        with patch("app.core.rate_limit.get_redis_client", return_value=mock_redis):
            await RateLimiter(requests=5, window=60)(mock_request)

    @pytest.mark.anyio
    async def test_forwarded_for_identifies_client(self, mock_request, enabled_settings):
        """Primeiro IP de X-Forwarded-For identifica o cliente."""
        mock_request.headers = {"X-Forwarded-For": "203.0.113.7, 10.0.0.1"}
        mock_redis = AsyncMock()
        mock_redis.incr.return_value = 2

        with patch("app.core.rate_limit.get_redis_client", return_value=mock_redis):
            await RateLimiter(requests=5, window=60, key_prefix="rl")(mock_request)

        mock_redis.incr.assert_awaited_once_with("rl:ip:203.0.113.7")
