"""
Repository base com operações CRUD genéricas.
"""

from typing import Any, Generic, Type, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.pagination import Page, PageRequest
from app.db.session import Base
from app.models.enums import SortDirection

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Repository base com operações CRUD.

    Fornece métodos genéricos para:
    - get_by_id: Buscar por ID
    - exists: Verificar existência por ID
    - paginate: Listar uma página (com filtros opcionais)
    - create: Criar registro
    - replace: Substituir todos os campos de um registro
    - delete: Remover registro
    - count: Contar registros
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        self.model = model
        self.db = db

    @property
    def sortable_fields(self) -> frozenset[str]:
        """Colunas aceitas no parâmetro sort."""
        return frozenset(self.model.__table__.columns.keys())

    async def get_by_id(self, id: int) -> ModelType | None:
        """Busca registro por ID."""
        return await self.db.get(self.model, id)

    async def exists(self, id: int) -> bool:
        """Verifica se existe registro com o ID."""
        result = await self.db.execute(
            select(self.model.id).where(self.model.id == id)
        )
        return result.scalar_one_or_none() is not None

    async def paginate(
        self,
        page_request: PageRequest,
        *filters: Any,
    ) -> Page[ModelType]:
        """
        Lista uma página de registros.

        Args:
            page_request: Página, tamanho e ordenação
            *filters: Expressões WHERE aplicadas à consulta e à contagem

        Returns:
            Page com os registros e o total que satisfaz os filtros
        """
        count_result = await self.db.execute(
            select(func.count()).select_from(self.model).where(*filters)
        )
        total = count_result.scalar_one()

        query = self._apply_sort(select(self.model).where(*filters), page_request)
        result = await self.db.execute(
            query
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        items = list(result.scalars().all())

        return Page(
            items=items,
            number=page_request.page,
            size=page_request.size,
            total=total,
        )

    def _apply_sort(self, query: Select, page_request: PageRequest) -> Select:
        """Aplica a ordenação pedida; o id é sempre o critério de desempate."""
        columns = self.model.__table__.columns
        for order in page_request.sort:
            column = columns[order.field]
            query = query.order_by(
                column.desc() if order.direction == SortDirection.DESC else column.asc()
            )
        return query.order_by(self.model.id.asc())

    async def create(self, **kwargs: Any) -> ModelType:
        """Cria novo registro."""
        instance = self.model(**kwargs)
        self.db.add(instance)
        await self.db.commit()
        await self.db.refresh(instance)
        return instance

    async def replace(
        self,
        instance: ModelType,
        **kwargs: Any,
    ) -> ModelType:
        """
        Substitui os campos do registro.

        Diferente de uma atualização parcial, valores None também são
        gravados: o payload representa o registro inteiro.
        """
        for key, value in kwargs.items():
            setattr(instance, key, value)
        await self.db.commit()
        await self.db.refresh(instance)
        return instance

    async def delete(self, instance: ModelType) -> None:
        """Remove registro."""
        await self.db.delete(instance)
        await self.db.commit()

    async def count(self) -> int:
        """Conta total de registros."""
        result = await self.db.execute(
            select(func.count(self.model.id))
        )
        return result.scalar_one()
