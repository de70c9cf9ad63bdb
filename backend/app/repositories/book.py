"""
Repository para operações de Book no banco de dados.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.pagination import Page, PageRequest
from app.models.book import Book
from app.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """Repository para operações CRUD de Book."""

    def __init__(self, db: AsyncSession):
        super().__init__(Book, db)

    async def get_by_author(
        self,
        author_id: int,
        page_request: PageRequest,
    ) -> Page[Book]:
        """Lista uma página de livros de um autor."""
        return await self.paginate(page_request, Book.author_id == author_id)

    async def get_by_publisher(
        self,
        publisher_id: int,
        page_request: PageRequest,
    ) -> Page[Book]:
        """Lista uma página de livros de uma editora."""
        return await self.paginate(page_request, Book.publisher_id == publisher_id)
