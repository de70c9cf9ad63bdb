"""
Schemas Pydantic para Comment.
"""

from pydantic import Field

from app.schemas.base import BaseSchema, TimestampSchema


class CommentBase(BaseSchema):
    """Campos de domínio do comentário."""
    text: str = Field(..., min_length=1, max_length=2000, examples=["Obra-prima da ficção científica."])
    book_id: int = Field(..., ge=1)


class CommentDTO(CommentBase):
    """Payload de criação (sem id) e atualização (com id)."""
    id: int | None = None


class CommentRead(CommentBase, TimestampSchema):
    """Schema para leitura de comentário."""
    id: int
