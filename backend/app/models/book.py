"""
Model de livro do catálogo.
"""

from datetime import date
from typing import Optional

from sqlalchemy import BigInteger, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base
from app.models.base import IdentityMixin, TimestampMixin


class Book(Base, IdentityMixin, TimestampMixin):
    """
    Livro do catálogo.

    Autor e editora são referenciados apenas por FK; a navegação pelos
    relacionamentos acontece pelas listagens filtradas
    (/books/author/{id} e /books/publisher/{id}).

    Attributes:
        id: ID sequencial do livro
        title: Título do livro
        isbn: ISBN-10 ou ISBN-13 (opcional)
        description: Sinopse (opcional)
        publication_date: Data de publicação (opcional)
        pages: Número de páginas (opcional)
        author_id: FK para o autor (opcional)
        publisher_id: FK para a editora (opcional)
    """
    __tablename__ = "books"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    isbn: Mapped[Optional[str]] = mapped_column(String(17), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    publication_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    pages: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    author_id: Mapped[Optional[int]] = mapped_column(
        BigInteger,
        ForeignKey("authors.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    publisher_id: Mapped[Optional[int]] = mapped_column(
        BigInteger,
        ForeignKey("publishers.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Book {self.title}>"
