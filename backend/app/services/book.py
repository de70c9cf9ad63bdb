"""
Service para lógica de negócio de Book.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import BadRequestAlertError
from app.core.pagination import Page, PageRequest
from app.models.book import Book
from app.repositories.author import AuthorRepository
from app.repositories.book import BookRepository
from app.repositories.publisher import PublisherRepository
from app.schemas.book import BookDTO
from app.services.base import CrudService


class BookService(CrudService[Book, BookDTO]):
    """Service para operações de Book."""

    entity_name = "book"
    not_found_message = "Livro não encontrado"

    def __init__(self, db: AsyncSession):
        super().__init__(BookRepository(db))
        self.author_repo = AuthorRepository(db)
        self.publisher_repo = PublisherRepository(db)

    async def get_books_by_author(
        self,
        author_id: int,
        page_request: PageRequest,
    ) -> Page[Book]:
        """
        Lista livros de um autor.

        Autor inexistente resulta em página vazia, não em erro.
        """
        self.validate_sort(page_request)
        return await self.repo.get_by_author(author_id, page_request)

    async def get_books_by_publisher(
        self,
        publisher_id: int,
        page_request: PageRequest,
    ) -> Page[Book]:
        """
        Lista livros de uma editora.

        Editora inexistente resulta em página vazia, não em erro.
        """
        self.validate_sort(page_request)
        return await self.repo.get_by_publisher(publisher_id, page_request)

    async def validate_references(self, data: BookDTO) -> None:
        """
        Verifica se autor e editora informados existem.

        Raises:
            BadRequestAlertError: authornotfound / publishernotfound
        """
        if data.author_id is not None and not await self.author_repo.exists(data.author_id):
            raise BadRequestAlertError(
                "Autor não encontrado",
                entity_name=self.entity_name,
                error_key="authornotfound",
            )

        if data.publisher_id is not None and not await self.publisher_repo.exists(data.publisher_id):
            raise BadRequestAlertError(
                "Editora não encontrada",
                entity_name=self.entity_name,
                error_key="publishernotfound",
            )
