"""
Schemas Pydantic para Publisher.
"""

from pydantic import Field

from app.schemas.base import BaseSchema, TimestampSchema


class PublisherBase(BaseSchema):
    """Campos de domínio da editora."""
    name: str = Field(..., min_length=1, max_length=255, examples=["Chilton Books"])
    country: str | None = Field(None, max_length=100, examples=["Estados Unidos"])
    website: str | None = Field(None, max_length=255)


class PublisherDTO(PublisherBase):
    """Payload de criação (sem id) e atualização (com id)."""
    id: int | None = None


class PublisherRead(PublisherBase, TimestampSchema):
    """Schema para leitura de editora."""
    id: int
