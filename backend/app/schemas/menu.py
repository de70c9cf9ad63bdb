"""
Schemas Pydantic para o menu de entidades do front end.
"""

from pydantic import BaseModel, ConfigDict


class MenuItemRead(BaseModel):
    """Entrada do menu: rota do cliente, chave de tradução e ícone."""
    model_config = ConfigDict(from_attributes=True)

    route: str
    label_key: str
    icon: str


class EntitiesMenuRead(BaseModel):
    """Dropdown de entidades com seus itens na ordem de exibição."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    label_key: str
    icon: str
    items: list[MenuItemRead]
