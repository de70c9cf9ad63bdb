"""
Enums compartilhados pela aplicação.
"""

import enum


class SortDirection(str, enum.Enum):
    """Direção de ordenação de uma consulta paginada."""
    ASC = "asc"
    DESC = "desc"


class AlertAction(str, enum.Enum):
    """
    Evento de entidade comunicado ao front end via headers de alerta.

    O valor compõe a chave de tradução: <app>.<entidade>.<ação>
    """
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
