"""
Ponto de entrada da aplicação FastAPI.

Este módulo configura a aplicação FastAPI, inclui rotas, registra os
exception handlers e define handlers de ciclo de vida (startup/shutdown).
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Response, status
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes.router import api_router
from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.db.session import check_database_connection, engine
from app.db.redis import init_redis, close_redis, check_redis_connection
from app.schemas.health import HealthResponse, ReadinessResponse

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gerencia o ciclo de vida da aplicação.

    Startup:
        - Configura logging
        - Conecta ao Redis
        - Verifica conexão com PostgreSQL

    Shutdown:
        - Fecha conexão com Redis
        - Fecha pool de conexões do banco
    """
    # Startup
    setup_logging()
    logger.info(f"Iniciando {settings.APP_NAME} em ambiente {settings.ENVIRONMENT}")

    try:
        await init_redis()
        if await check_redis_connection():
            logger.info("Conexão com Redis estabelecida")
        else:
            logger.warning("Redis não disponível - rate limiting desabilitado")
    except Exception as e:
        logger.warning(f"Falha ao conectar ao Redis: {e}")

    success, error = await check_database_connection()
    if success:
        logger.info("Conexão com PostgreSQL estabelecida")
    else:
        logger.warning(f"PostgreSQL não disponível: {error}")

    yield

    # Shutdown
    logger.info(f"Encerrando {settings.APP_NAME}")
    await close_redis()
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    description="API REST para o catálogo da biblioteca: autores, livros, comentários e editoras",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Headers de paginação e alerta precisam ser legíveis pelo front end
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[
        "Location",
        "Link",
        "X-Total-Count",
        f"X-{settings.ALERT_APP_NAME}-alert",
        f"X-{settings.ALERT_APP_NAME}-error",
        f"X-{settings.ALERT_APP_NAME}-params",
    ],
)

register_exception_handlers(app)
app.include_router(api_router)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Verifica status da aplicação",
    description="Retorna o status atual da aplicação e informações básicas do ambiente.",
)
async def health_check() -> HealthResponse:
    """
    Endpoint de healthcheck para monitoramento.

    Não consulta dependências externas; útil para liveness probes.
    """
    return HealthResponse(
        status="healthy",
        app_name=settings.APP_NAME,
        environment=settings.ENVIRONMENT,
    )


@app.get(
    "/health/ready",
    response_model=ReadinessResponse,
    tags=["Health"],
    summary="Verifica dependências da aplicação",
    description="Verifica PostgreSQL e Redis. Retorna 503 se algum estiver indisponível.",
)
async def readiness_check(response: Response) -> ReadinessResponse:
    db_ok, _ = await check_database_connection()
    redis_ok = await check_redis_connection()

    if not (db_ok and redis_ok):
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return ReadinessResponse(
        status="healthy" if db_ok and redis_ok else "unhealthy",
        app_name=settings.APP_NAME,
        environment=settings.ENVIRONMENT,
        database="up" if db_ok else "down",
        redis="up" if redis_ok else "down",
    )
