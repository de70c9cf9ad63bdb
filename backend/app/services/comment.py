"""
Service para lógica de negócio de Comment.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import BadRequestAlertError
from app.models.comment import Comment
from app.repositories.book import BookRepository
from app.repositories.comment import CommentRepository
from app.schemas.comment import CommentDTO
from app.services.base import CrudService


class CommentService(CrudService[Comment, CommentDTO]):
    """Service para operações de Comment."""

    entity_name = "comment"
    not_found_message = "Comentário não encontrado"

    def __init__(self, db: AsyncSession):
        super().__init__(CommentRepository(db))
        self.book_repo = BookRepository(db)

    async def validate_references(self, data: CommentDTO) -> None:
        """
        Verifica se o livro comentado existe.

        Raises:
            BadRequestAlertError: booknotfound
        """
        if not await self.book_repo.exists(data.book_id):
            raise BadRequestAlertError(
                "Livro não encontrado",
                entity_name=self.entity_name,
                error_key="booknotfound",
            )
