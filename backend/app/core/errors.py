"""
Erros estruturados da API e seus exception handlers.

BadRequestAlertError representa uma requisição rejeitada por uma regra
identificada por uma chave legível por máquina (ex.: "idexists", "idnull").
O front end monta a mensagem traduzida a partir de entidade + chave.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from app.core.alerts import failure_alert_headers
from app.schemas.base import ErrorResponse

logger = logging.getLogger(__name__)


class BadRequestAlertError(HTTPException):
    """
    HTTP 400 com entidade e chave de erro.

    Uso:
        raise BadRequestAlertError(
            "Um novo livro não pode ter ID",
            entity_name="book",
            error_key="idexists",
        )
    """

    def __init__(self, message: str, entity_name: str, error_key: str):
        self.entity_name = entity_name
        self.error_key = error_key
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
            headers=failure_alert_headers(entity_name, error_key),
        )


async def bad_request_alert_handler(
    request: Request,
    exc: BadRequestAlertError,
) -> JSONResponse:
    """Converte BadRequestAlertError em ErrorResponse + headers de erro."""
    logger.debug(
        f"Requisição rejeitada em {request.url.path}: "
        f"{exc.entity_name}/{exc.error_key} - {exc.detail}"
    )
    body = ErrorResponse(
        error=f"error.{exc.error_key}",
        message=exc.detail,
        entity_name=exc.entity_name,
        error_key=exc.error_key,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=exc.headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra os exception handlers customizados na aplicação."""
    app.add_exception_handler(BadRequestAlertError, bad_request_alert_handler)
