"""
Formatting utilities for display.

Provides consistent formatting for dates and backend alert/error keys.
"""

from datetime import datetime
from typing import Optional

from .api_client import Alert, APIError

ENTITY_LABELS = {
    "author": "Autor",
    "book": "Livro",
    "comment": "Comentário",
    "publisher": "Editora",
}

ACTION_MESSAGES = {
    "created": "{entity} criado(a) com ID {param}",
    "updated": "{entity} {param} atualizado(a)",
    "deleted": "{entity} {param} removido(a)",
}

ERROR_MESSAGES = {
    "idexists": "Um(a) novo(a) {entity} não pode ter ID",
    "idnull": "ID inválido para {entity}",
    "authornotfound": "Autor não encontrado",
    "publishernotfound": "Editora não encontrada",
    "booknotfound": "Livro não encontrado",
    "sortinvalid": "Campo de ordenação inválido",
}


def format_date(value: Optional[str]) -> str:
    """
    Format an ISO date or datetime for display.

    Returns:
        Formatted date string (DD/MM/YYYY) or "-"
    """
    if not value:
        return "-"

    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).strftime("%d/%m/%Y")
    except ValueError:
        return str(value)


def format_alert(alert: Optional[Alert]) -> str:
    """
    Translate an alert key like "libraryApp.book.created" into a message.
    """
    if alert is None:
        return "Operação concluída"

    _, entity, action = alert.key.rsplit(".", 2)
    template = ACTION_MESSAGES.get(action, "{entity}: {param}")
    return template.format(entity=ENTITY_LABELS.get(entity, entity), param=alert.param)


def format_error(error: APIError) -> str:
    """Translate a structured API error (entity + key) into a message."""
    if error.error_key in ERROR_MESSAGES:
        entity = ENTITY_LABELS.get(error.entity_name or "", error.entity_name or "")
        return ERROR_MESSAGES[error.error_key].format(entity=entity.lower())
    return error.message
