"""
Model de editora.
"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base
from app.models.base import IdentityMixin, TimestampMixin


class Publisher(Base, IdentityMixin, TimestampMixin):
    """
    Editora responsável pela publicação de livros.

    Attributes:
        id: ID sequencial da editora
        name: Nome da editora
        country: País de origem (opcional)
        website: Site institucional (opcional)
    """
    __tablename__ = "publishers"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    country: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Publisher {self.name}>"
