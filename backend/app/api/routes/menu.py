"""
Endpoint do menu de entidades.

Contratos:
    - GET /menu/entities: Dropdown de entidades exibido pelo front end
"""

from fastapi import APIRouter

from app.core.menu import ENTITIES_MENU
from app.schemas.menu import EntitiesMenuRead

router = APIRouter(prefix="/menu", tags=["Menu"])


@router.get(
    "/entities",
    response_model=EntitiesMenuRead,
    summary="Menu de entidades",
    description="Rotas, chaves de tradução e ícones do dropdown de entidades, na ordem de exibição.",
)
async def get_entities_menu() -> EntitiesMenuRead:
    return EntitiesMenuRead.model_validate(ENTITIES_MENU)
