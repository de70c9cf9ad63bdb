"""
Headers de alerta consumidos pelo front end.

Cada mutação bem-sucedida (criação, atualização, remoção) é descrita por um
EntityAlert: entidade afetada, identificador e ação. O front end traduz a
chave <app>.<entidade>.<ação> em uma notificação para o usuário.

Headers gerados (com ALERT_APP_NAME=libraryApp):
    X-libraryApp-alert: libraryApp.book.created
    X-libraryApp-params: 1

Falhas de validação usam o par:
    X-libraryApp-error: error.idexists
    X-libraryApp-params: book
"""

from dataclasses import dataclass

from app.core.config import get_settings
from app.models.enums import AlertAction


def _header(suffix: str) -> str:
    return f"X-{get_settings().ALERT_APP_NAME}-{suffix}"


@dataclass(frozen=True)
class EntityAlert:
    """Evento de entidade: {entity, identifier, code}."""
    entity: str
    identifier: int | str
    code: AlertAction

    @property
    def message(self) -> str:
        return f"{get_settings().ALERT_APP_NAME}.{self.entity}.{self.code.value}"

    def to_headers(self) -> dict[str, str]:
        return {
            _header("alert"): self.message,
            _header("params"): str(self.identifier),
        }


def failure_alert_headers(entity_name: str, error_key: str) -> dict[str, str]:
    """Headers de erro para uma falha identificada por entidade + chave."""
    return {
        _header("error"): f"error.{error_key}",
        _header("params"): entity_name,
    }
