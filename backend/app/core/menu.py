"""
Menu de entidades do front end administrativo.

Tabela estática e imutável, carregada uma vez no import. Cada item é uma
tripla (rota do cliente, chave de tradução, ícone FontAwesome); a ordem da
tupla é a ordem de exibição no dropdown.

Para adicionar uma entidade ao menu basta acrescentar um MenuItem.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MenuItem:
    route: str
    label_key: str
    icon: str = "asterisk"


@dataclass(frozen=True)
class EntitiesMenu:
    id: str
    label_key: str
    icon: str
    items: tuple[MenuItem, ...]


ENTITIES_MENU = EntitiesMenu(
    id="entity-menu",
    label_key="global.menu.entities.main",
    icon="th-list",
    items=(
        MenuItem(route="/entity/author", label_key="global.menu.entities.author"),
        MenuItem(route="/entity/book", label_key="global.menu.entities.book"),
        MenuItem(route="/entity/comment", label_key="global.menu.entities.comment"),
        MenuItem(route="/entity/publisher", label_key="global.menu.entities.publisher"),
    ),
)
