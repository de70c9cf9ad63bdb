"""
Script de seed para popular o catálogo com dados de exemplo.

Uso:
    python -m app.db.seed

Só insere dados quando o catálogo está vazio.
"""

import asyncio
import logging
from datetime import date

from app.core.logging import setup_logging
from app.db.session import async_session_factory, engine
from app.models.author import Author
from app.models.book import Book
from app.models.comment import Comment
from app.models.publisher import Publisher
from app.repositories.book import BookRepository

logger = logging.getLogger(__name__)


async def seed_catalog() -> None:
    """Cria autores, editoras, livros e comentários de exemplo."""
    async with async_session_factory() as db:
        if await BookRepository(db).count() > 0:
            logger.info("Catálogo já possui livros; seed ignorado")
            return

        herbert = Author(name="Frank Herbert", birth_date=date(1920, 10, 8))
        le_guin = Author(name="Ursula K. Le Guin", birth_date=date(1929, 10, 21))
        chilton = Publisher(name="Chilton Books", country="Estados Unidos")
        ace = Publisher(name="Ace Books", country="Estados Unidos")
        db.add_all([herbert, le_guin, chilton, ace])
        await db.flush()

        dune = Book(
            title="Dune",
            isbn="978-0441013593",
            publication_date=date(1965, 8, 1),
            pages=412,
            author_id=herbert.id,
            publisher_id=chilton.id,
        )
        left_hand = Book(
            title="The Left Hand of Darkness",
            isbn="978-0441478125",
            publication_date=date(1969, 3, 1),
            pages=304,
            author_id=le_guin.id,
            publisher_id=ace.id,
        )
        db.add_all([dune, left_hand])
        await db.flush()

        db.add(Comment(text="Obra-prima da ficção científica.", book_id=dune.id))
        await db.commit()

        logger.info("Seed do catálogo concluído: 2 autores, 2 editoras, 2 livros")


async def main() -> None:
    """Executa todos os seeds."""
    setup_logging()
    logger.info("Executando seeds...")
    await seed_catalog()
    await engine.dispose()
    logger.info("Seeds concluídos!")


if __name__ == "__main__":
    asyncio.run(main())
