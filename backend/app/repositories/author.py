"""
Repository para operações de Author no banco de dados.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.author import Author
from app.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """Repository para operações CRUD de Author."""

    def __init__(self, db: AsyncSession):
        super().__init__(Author, db)
