"""
Paginação dos endpoints de listagem.

Entrada: PageRequest (page, size, sort) extraído da query string.
Saída: Page, envelope retornado por valor pelos services. A camada HTTP
converte o envelope em headers (X-Total-Count e Link) e devolve apenas os
itens no corpo da resposta.

Formato do parâmetro sort (pode ser repetido):
    ?sort=title            -> title ascendente
    ?sort=title,desc       -> title descendente
    ?sort=pages,desc&sort=id
"""

from dataclasses import dataclass
from typing import Generic, List, TypeVar
from urllib.parse import urlencode

from fastapi import HTTPException, Query, status

from app.core.config import get_settings
from app.models.enums import SortDirection

settings = get_settings()

T = TypeVar("T")


@dataclass(frozen=True)
class SortOrder:
    """Critério de ordenação: campo + direção."""
    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, raw: str) -> "SortOrder":
        """
        Converte "campo" ou "campo,direção" em SortOrder.

        Raises:
            ValueError: Campo vazio ou direção diferente de asc/desc
        """
        name, _, direction = raw.partition(",")
        name = name.strip()
        direction = direction.strip().lower() or SortDirection.ASC.value

        if not name:
            raise ValueError("Campo de ordenação vazio")
        try:
            return cls(field=name, direction=SortDirection(direction))
        except ValueError:
            raise ValueError(f"Direção de ordenação inválida: {direction}")


@dataclass(frozen=True)
class PageRequest:
    """Fatia solicitada de um resultado: número da página (base 0), tamanho e ordenação."""
    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """
    Página de resultados.

    Attributes:
        items: Conteúdo da página
        number: Número da página (base 0)
        size: Tamanho solicitado
        total: Total de registros que satisfazem a consulta
    """
    items: List[T]
    number: int
    size: int
    total: int

    @property
    def total_pages(self) -> int:
        return (self.total + self.size - 1) // self.size if self.size > 0 else 0

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0


def get_page_request(
    page: int = Query(0, ge=0, description="Número da página (começa em 0)"),
    size: int = Query(
        settings.DEFAULT_PAGE_SIZE,
        ge=1,
        le=settings.MAX_PAGE_SIZE,
        description="Itens por página",
    ),
    sort: list[str] | None = Query(
        None,
        description="Ordenação no formato campo[,asc|desc]; pode ser repetido",
    ),
) -> PageRequest:
    """
    Dependency que monta o PageRequest a partir da query string.

    Raises:
        HTTPException 400: Parâmetro sort mal formado
    """
    try:
        orders = tuple(SortOrder.parse(raw) for raw in sort or [])
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    return PageRequest(page=page, size=size, sort=orders)


def _page_uri(base_path: str, number: int, size: int) -> str:
    return f"{base_path}?{urlencode({'page': number, 'size': size})}"


def pagination_headers(page: Page, base_path: str) -> dict[str, str]:
    """
    Gera os headers de paginação para uma página.

    X-Total-Count carrega o total de registros. Link traz as relações
    next (se houver próxima página), prev (se não for a primeira),
    last e first, todas relativas a base_path.

    Args:
        page: Página retornada pelo service
        base_path: Caminho da requisição usado nas URIs dos links

    Returns:
        Dict com os headers X-Total-Count e Link
    """
    links = []
    if page.has_next:
        links.append(f'<{_page_uri(base_path, page.number + 1, page.size)}>; rel="next"')
    if page.has_previous:
        links.append(f'<{_page_uri(base_path, page.number - 1, page.size)}>; rel="prev"')

    last_page = max(page.total_pages - 1, 0)
    links.append(f'<{_page_uri(base_path, last_page, page.size)}>; rel="last"')
    links.append(f'<{_page_uri(base_path, 0, page.size)}>; rel="first"')

    return {
        "X-Total-Count": str(page.total),
        "Link": ",".join(links),
    }
