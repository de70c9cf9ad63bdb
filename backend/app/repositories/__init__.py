"""
Módulo de repositórios - acesso a dados.
"""

from app.repositories.base import BaseRepository
from app.repositories.author import AuthorRepository
from app.repositories.publisher import PublisherRepository
from app.repositories.book import BookRepository
from app.repositories.comment import CommentRepository

__all__ = [
    "BaseRepository",
    "AuthorRepository",
    "PublisherRepository",
    "BookRepository",
    "CommentRepository",
]
