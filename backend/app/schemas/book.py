"""
Schemas Pydantic para Book.

Create e update recebem o mesmo payload (BookDTO), diferenciados pela
presença do id: na criação ele deve estar ausente, na atualização é
obrigatório e identifica o registro substituído por inteiro.
"""

from datetime import date

from pydantic import Field, field_validator

from app.schemas.base import BaseSchema, TimestampSchema


class BookBase(BaseSchema):
    """Campos de domínio do livro."""
    title: str = Field(..., min_length=1, max_length=500, examples=["Dune"])
    isbn: str | None = Field(
        None,
        min_length=10,
        max_length=17,
        pattern=r"^[0-9Xx-]+$",
        examples=["978-0441013593"],
    )
    description: str | None = None
    publication_date: date | None = Field(None, examples=["1965-08-01"])
    pages: int | None = Field(None, ge=1, le=50000, examples=[412])
    author_id: int | None = Field(None, ge=1)
    publisher_id: int | None = Field(None, ge=1)

    @field_validator("publication_date")
    @classmethod
    def validate_publication_date(cls, v: date | None) -> date | None:
        if v is not None and v > date.today():
            raise ValueError("Data de publicação não pode ser no futuro")
        return v


class BookDTO(BookBase):
    """Payload de criação (sem id) e atualização (com id)."""
    id: int | None = None


class BookRead(BookBase, TimestampSchema):
    """Schema para leitura de livro."""
    id: int
