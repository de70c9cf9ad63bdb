"""
Service base com o contrato de persistência compartilhado pelas entidades.

Contrato:
    - save(dto): insere quando dto.id é None; caso contrário substitui o
      registro com o mesmo id
    - find_all(page_request): página de registros
    - find_one(id): registro ou None
    - delete(id): remove o registro; id inexistente é no-op
"""

import logging
from typing import Generic, TypeVar

from fastapi import HTTPException, status

from app.core.errors import BadRequestAlertError
from app.core.pagination import Page, PageRequest
from app.repositories.base import BaseRepository, ModelType
from app.schemas.base import BaseSchema

logger = logging.getLogger(__name__)

DTOType = TypeVar("DTOType", bound=BaseSchema)


class CrudService(Generic[ModelType, DTOType]):
    """
    Service genérico de CRUD.

    Subclasses definem entity_name (usado nos alertas e erros) e
    not_found_message, e podem sobrescrever validate_references para
    checar FKs antes de gravar.
    """

    entity_name: str = ""
    not_found_message: str = "Registro não encontrado"

    def __init__(self, repo: BaseRepository[ModelType]):
        self.repo = repo

    async def save(self, data: DTOType) -> ModelType:
        """
        Grava o registro.

        Raises:
            HTTPException 404: Atualização de ID inexistente
            BadRequestAlertError: Referência para registro inexistente
        """
        await self.validate_references(data)
        fields = data.model_dump(exclude={"id"})

        if data.id is None:
            instance = await self.repo.create(**fields)
            logger.info(f"{self.entity_name} criado (ID: {instance.id})")
            return instance

        instance = await self.repo.get_by_id(data.id)
        if instance is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=self.not_found_message,
            )

        instance = await self.repo.replace(instance, **fields)
        logger.info(f"{self.entity_name} atualizado (ID: {instance.id})")
        return instance

    async def find_all(self, page_request: PageRequest) -> Page[ModelType]:
        """Lista uma página de registros."""
        self.validate_sort(page_request)
        return await self.repo.paginate(page_request)

    async def find_one(self, id: int) -> ModelType | None:
        """Busca registro por ID; None se não existir."""
        return await self.repo.get_by_id(id)

    async def delete(self, id: int) -> None:
        """Remove registro por ID. ID inexistente não gera erro."""
        instance = await self.repo.get_by_id(id)
        if instance is None:
            logger.debug(f"{self.entity_name} {id} não existe; nada a remover")
            return

        await self.repo.delete(instance)
        logger.info(f"{self.entity_name} removido (ID: {id})")

    async def validate_references(self, data: DTOType) -> None:
        """Checa FKs do payload. Sem FKs por padrão."""

    def validate_sort(self, page_request: PageRequest) -> None:
        """
        Garante que todos os campos de ordenação existem no model.

        Raises:
            BadRequestAlertError: Campo de ordenação desconhecido
        """
        unknown = [
            order.field
            for order in page_request.sort
            if order.field not in self.repo.sortable_fields
        ]
        if unknown:
            raise BadRequestAlertError(
                f"Campo de ordenação inválido: {', '.join(unknown)}",
                entity_name=self.entity_name,
                error_key="sortinvalid",
            )
