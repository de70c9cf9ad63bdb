"""
Router principal da API.

Inclui todos os routers de endpoints sob API_PREFIX.
"""

from fastapi import APIRouter

from app.api.routes.authors import router as authors_router
from app.api.routes.books import router as books_router
from app.api.routes.comments import router as comments_router
from app.api.routes.menu import router as menu_router
from app.api.routes.publishers import router as publishers_router
from app.core.config import get_settings

settings = get_settings()

api_router = APIRouter(prefix=settings.API_PREFIX)

api_router.include_router(authors_router)
api_router.include_router(books_router)
api_router.include_router(comments_router)
api_router.include_router(publishers_router)
api_router.include_router(menu_router)
