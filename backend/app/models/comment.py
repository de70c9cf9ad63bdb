"""
Model de comentário sobre um livro.
"""

from sqlalchemy import BigInteger, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base
from app.models.base import IdentityMixin, TimestampMixin


class Comment(Base, IdentityMixin, TimestampMixin):
    """
    Comentário de leitor sobre um livro.

    Removido em cascata junto com o livro.
    """
    __tablename__ = "comments"

    text: Mapped[str] = mapped_column(String(2000), nullable=False)
    book_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("books.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Comment {self.id} on book {self.book_id}>"
