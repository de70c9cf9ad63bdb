"""
Schemas Pydantic para Author.
"""

from datetime import date

from pydantic import Field

from app.schemas.base import BaseSchema, TimestampSchema


class AuthorBase(BaseSchema):
    """Campos de domínio do autor."""
    name: str = Field(..., min_length=1, max_length=255, examples=["Frank Herbert"])
    birth_date: date | None = Field(None, examples=["1920-10-08"])
    biography: str | None = None


class AuthorDTO(AuthorBase):
    """Payload de criação (sem id) e atualização (com id)."""
    id: int | None = None


class AuthorRead(AuthorBase, TimestampSchema):
    """Schema para leitura de autor."""
    id: int
