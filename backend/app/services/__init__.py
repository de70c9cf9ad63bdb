"""
Módulo de serviços - lógica de negócio.
"""

from app.services.base import CrudService
from app.services.author import AuthorService
from app.services.publisher import PublisherService
from app.services.book import BookService
from app.services.comment import CommentService

__all__ = [
    "CrudService",
    "AuthorService",
    "PublisherService",
    "BookService",
    "CommentService",
]
