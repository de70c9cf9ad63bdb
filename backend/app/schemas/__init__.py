"""
Schemas Pydantic da aplicação.
"""

from app.schemas.base import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    TimestampSchema,
)
from app.schemas.health import HealthResponse, ReadinessResponse
from app.schemas.author import AuthorDTO, AuthorRead
from app.schemas.publisher import PublisherDTO, PublisherRead
from app.schemas.book import BookDTO, BookRead
from app.schemas.comment import CommentDTO, CommentRead
from app.schemas.menu import EntitiesMenuRead, MenuItemRead

__all__ = [
    # Base
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "TimestampSchema",
    # Health
    "HealthResponse",
    "ReadinessResponse",
    # Author
    "AuthorDTO",
    "AuthorRead",
    # Publisher
    "PublisherDTO",
    "PublisherRead",
    # Book
    "BookDTO",
    "BookRead",
    # Comment
    "CommentDTO",
    "CommentRead",
    # Menu
    "EntitiesMenuRead",
    "MenuItemRead",
]
