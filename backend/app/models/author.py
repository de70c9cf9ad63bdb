"""
Model de autor de livros.
"""

from datetime import date
from typing import Optional

from sqlalchemy import Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base
from app.models.base import IdentityMixin, TimestampMixin


class Author(Base, IdentityMixin, TimestampMixin):
    """
    Autor de livros.

    Attributes:
        id: ID sequencial do autor
        name: Nome do autor
        birth_date: Data de nascimento (opcional)
        biography: Biografia resumida (opcional)
    """
    __tablename__ = "authors"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    birth_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    biography: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Author {self.name}>"
