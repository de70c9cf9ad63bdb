"""
Repository para operações de Comment no banco de dados.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.comment import Comment
from app.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """Repository para operações CRUD de Comment."""

    def __init__(self, db: AsyncSession):
        super().__init__(Comment, db)
