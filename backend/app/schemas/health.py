"""
Schemas Pydantic para os endpoints de healthcheck.
"""

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """
    Resposta do endpoint de healthcheck.

    Attributes:
        status: Status da aplicação ("healthy" ou "unhealthy")
        app_name: Nome da aplicação
        environment: Ambiente atual (development, staging, production)
    """

    status: str
    app_name: str
    environment: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "app_name": "Library Catalog API",
                    "environment": "development"
                }
            ]
        }
    }


class ReadinessResponse(HealthResponse):
    """
    Resposta do readiness check, com o estado das dependências externas.

    Attributes:
        database: "up" se o PostgreSQL respondeu
        redis: "up" se o Redis respondeu
    """

    database: Literal["up", "down"]
    redis: Literal["up", "down"]
