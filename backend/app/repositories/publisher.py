"""
Repository para operações de Publisher no banco de dados.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.publisher import Publisher
from app.repositories.base import BaseRepository


class PublisherRepository(BaseRepository[Publisher]):
    """Repository para operações CRUD de Publisher."""

    def __init__(self, db: AsyncSession):
        super().__init__(Publisher, db)
