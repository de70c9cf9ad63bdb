"""
Service para lógica de negócio de Publisher.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.publisher import Publisher
from app.repositories.publisher import PublisherRepository
from app.schemas.publisher import PublisherDTO
from app.services.base import CrudService


class PublisherService(CrudService[Publisher, PublisherDTO]):
    """Service para operações de Publisher."""

    entity_name = "publisher"
    not_found_message = "Editora não encontrada"

    def __init__(self, db: AsyncSession):
        super().__init__(PublisherRepository(db))
