"""
Models SQLAlchemy da aplicação.

Importar todos os models aqui para que o Alembic detecte as mudanças.
"""

from app.models.enums import AlertAction, SortDirection
from app.models.author import Author
from app.models.publisher import Publisher
from app.models.book import Book
from app.models.comment import Comment

__all__ = [
    "AlertAction",
    "SortDirection",
    "Author",
    "Publisher",
    "Book",
    "Comment",
]
