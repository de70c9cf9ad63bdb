"""
Fixtures compartilhadas para testes.

Os testes de API usam os services reais (validação de ordenação e de
referências incluída) sobre repositories em memória, então não precisam
de PostgreSQL nem Redis.
"""

from datetime import datetime, timezone
from typing import AsyncGenerator, Callable

import pytest
from httpx import AsyncClient, ASGITransport

from app.core.deps import (
    get_author_service,
    get_book_service,
    get_comment_service,
    get_publisher_service,
)
from app.core.pagination import Page, PageRequest
from app.main import app
from app.models.author import Author
from app.models.book import Book
from app.models.comment import Comment
from app.models.enums import SortDirection
from app.models.publisher import Publisher
from app.services.author import AuthorService
from app.services.book import BookService
from app.services.comment import CommentService
from app.services.publisher import PublisherService


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


# ==========================================
# Repositories em memória
# ==========================================

class InMemoryRepository:
    """
    Substituto do BaseRepository que guarda instâncias (não persistidas) em um dict.

    IDs começam em 1 e nunca são reutilizados.
    """

    def __init__(self, model):
        self.model = model
        self.records: dict = {}
        self._next_id = 1

    @property
    def sortable_fields(self) -> frozenset[str]:
        return frozenset(self.model.__table__.columns.keys())

    async def get_by_id(self, id: int):
        return self.records.get(id)

    async def exists(self, id: int) -> bool:
        return id in self.records

    async def paginate(self, page_request: PageRequest, *filters: Callable) -> Page:
        items = [r for r in self.records.values() if all(f(r) for f in filters)]

        # Ordenações estáveis aplicadas da última para a primeira
        items.sort(key=lambda r: r.id)
        for order in reversed(page_request.sort):
            items.sort(
                key=lambda r: (getattr(r, order.field) is None, getattr(r, order.field)),
                reverse=order.direction == SortDirection.DESC,
            )

        start = page_request.offset
        return Page(
            items=items[start:start + page_request.size],
            number=page_request.page,
            size=page_request.size,
            total=len(items),
        )

    async def create(self, **fields):
        now = datetime.now(timezone.utc)
        instance = self.model(id=self._next_id, created_at=now, updated_at=now, **fields)
        self._next_id += 1
        self.records[instance.id] = instance
        return instance

    async def replace(self, instance, **fields):
        for key, value in fields.items():
            setattr(instance, key, value)
        instance.updated_at = datetime.now(timezone.utc)
        return instance

    async def delete(self, instance) -> None:
        self.records.pop(instance.id, None)


class InMemoryBookRepository(InMemoryRepository):
    """Repository de livros com as listagens filtradas por autor e editora."""

    def __init__(self):
        super().__init__(Book)

    async def get_by_author(self, author_id: int, page_request: PageRequest) -> Page:
        return await self.paginate(page_request, lambda b: b.author_id == author_id)

    async def get_by_publisher(self, publisher_id: int, page_request: PageRequest) -> Page:
        return await self.paginate(page_request, lambda b: b.publisher_id == publisher_id)


@pytest.fixture
def book_store() -> InMemoryBookRepository:
    return InMemoryBookRepository()


@pytest.fixture
def author_store() -> InMemoryRepository:
    return InMemoryRepository(Author)


@pytest.fixture
def publisher_store() -> InMemoryRepository:
    return InMemoryRepository(Publisher)


@pytest.fixture
def comment_store() -> InMemoryRepository:
    return InMemoryRepository(Comment)


# ==========================================
# HTTP Client fixtures
# ==========================================

@pytest.fixture
async def client(
    book_store,
    author_store,
    publisher_store,
    comment_store,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Cliente HTTP assíncrono para testes.

    Os services são os reais; só os repositories são trocados pelos
    stores em memória.
    """
    book_service = BookService(db=None)
    book_service.repo = book_store
    book_service.author_repo = author_store
    book_service.publisher_repo = publisher_store

    author_service = AuthorService(db=None)
    author_service.repo = author_store

    publisher_service = PublisherService(db=None)
    publisher_service.repo = publisher_store

    comment_service = CommentService(db=None)
    comment_service.repo = comment_store
    comment_service.book_repo = book_store

    app.dependency_overrides[get_book_service] = lambda: book_service
    app.dependency_overrides[get_author_service] = lambda: author_service
    app.dependency_overrides[get_publisher_service] = lambda: publisher_service
    app.dependency_overrides[get_comment_service] = lambda: comment_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
