"""
Service para lógica de negócio de Author.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.author import Author
from app.repositories.author import AuthorRepository
from app.schemas.author import AuthorDTO
from app.services.base import CrudService


class AuthorService(CrudService[Author, AuthorDTO]):
    """
    Service para operações de Author.

    Ao remover um autor, os livros dele ficam sem autor (FK ON DELETE SET NULL).
    """

    entity_name = "author"
    not_found_message = "Autor não encontrado"

    def __init__(self, db: AsyncSession):
        super().__init__(AuthorRepository(db))
