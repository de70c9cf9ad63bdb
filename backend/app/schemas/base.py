"""
Schemas base reutilizáveis em toda a aplicação.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Schema base com configurações padrão."""
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
    )


class TimestampSchema(BaseSchema):
    """Schema com timestamps."""
    created_at: datetime
    updated_at: datetime


class ErrorDetail(BaseModel):
    """Detalhe de um erro."""
    field: str | None = None
    message: str


class ErrorResponse(BaseModel):
    """
    Resposta de erro padrão.

    Para erros de regra (BadRequestAlertError), entity_name e error_key
    permitem ao front end montar a mensagem traduzida.

    Exemplo:
        {
            "error": "error.idexists",
            "message": "Um novo livro não pode ter ID",
            "entity_name": "book",
            "error_key": "idexists",
            "details": null
        }
    """
    error: str
    message: str
    entity_name: str | None = None
    error_key: str | None = None
    details: List[ErrorDetail] | None = None
