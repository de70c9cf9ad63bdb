"""
Dependencies FastAPI compartilhadas pelos endpoints.

Os services são injetados via Depends para que possam ser substituídos
(app.dependency_overrides) sem tocar nos routers.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.pagination import PageRequest, get_page_request
from app.db.session import get_db
from app.services.author import AuthorService
from app.services.book import BookService
from app.services.comment import CommentService
from app.services.publisher import PublisherService

DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_book_service(db: DbSession) -> BookService:
    return BookService(db)


def get_author_service(db: DbSession) -> AuthorService:
    return AuthorService(db)


def get_publisher_service(db: DbSession) -> PublisherService:
    return PublisherService(db)


def get_comment_service(db: DbSession) -> CommentService:
    return CommentService(db)


# Type aliases para uso nos endpoints
BookServiceDep = Annotated[BookService, Depends(get_book_service)]
AuthorServiceDep = Annotated[AuthorService, Depends(get_author_service)]
PublisherServiceDep = Annotated[PublisherService, Depends(get_publisher_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]
Pageable = Annotated[PageRequest, Depends(get_page_request)]
