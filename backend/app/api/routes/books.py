"""
Endpoints de Livros.

Contratos:
    - POST /books: Cria livro (payload sem id)
    - PUT /books: Atualiza livro (payload com id, substituição completa)
    - GET /books: Lista livros paginado
    - GET /books/author/{id}: Lista livros de um autor
    - GET /books/publisher/{id}: Lista livros de uma editora
    - GET /books/{id}: Busca livro por ID
    - DELETE /books/{id}: Remove livro

Headers:
    - Listagens: X-Total-Count e Link (next/prev/last/first)
    - Criação/atualização/remoção: X-<app>-alert e X-<app>-params

Status codes:
    - 200: Sucesso
    - 201: Criado com sucesso (header Location aponta para o novo recurso)
    - 400: idexists, idnull, referência inexistente ou ordenação inválida
    - 404: Livro não encontrado
    - 422: Payload inválido
    - 429: Rate limit excedido (escritas)
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from app.core.alerts import EntityAlert
from app.core.deps import BookServiceDep, Pageable
from app.core.errors import BadRequestAlertError
from app.core.logging import get_logger
from app.core.pagination import pagination_headers
from app.core.rate_limit import rate_limit_write
from app.models.enums import AlertAction
from app.schemas.book import BookDTO, BookRead

ENTITY_NAME = "book"

logger = get_logger(__name__)
router = APIRouter(prefix="/books", tags=["Books"])


@router.post(
    "",
    response_model=BookRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(rate_limit_write)],
    summary="Criar livro",
    description="Cria um novo livro. O id é gerado pelo servidor e não pode ser informado.",
)
async def create_book(
    data: BookDTO,
    request: Request,
    response: Response,
    service: BookServiceDep,
) -> BookRead:
    """
    Cria novo livro no catálogo.

    Raises:
        400: Payload com id (idexists) ou autor/editora inexistente
    """
    logger.debug(f"Requisição REST para salvar Book: {data}")
    if data.id is not None:
        raise BadRequestAlertError(
            "Um novo livro não pode ter ID",
            entity_name=ENTITY_NAME,
            error_key="idexists",
        )

    book = await service.save(data)

    response.headers["Location"] = f"{request.url.path}/{book.id}"
    response.headers.update(
        EntityAlert(ENTITY_NAME, book.id, AlertAction.CREATED).to_headers()
    )
    return BookRead.model_validate(book)


@router.put(
    "",
    response_model=BookRead,
    dependencies=[Depends(rate_limit_write)],
    summary="Atualizar livro",
    description="Substitui todos os campos do livro identificado pelo id do payload.",
)
async def update_book(
    data: BookDTO,
    response: Response,
    service: BookServiceDep,
) -> BookRead:
    """
    Atualiza livro existente.

    Raises:
        400: Payload sem id (idnull) ou autor/editora inexistente
        404: Livro não encontrado
    """
    logger.debug(f"Requisição REST para atualizar Book: {data}")
    if data.id is None:
        raise BadRequestAlertError(
            "ID inválido",
            entity_name=ENTITY_NAME,
            error_key="idnull",
        )

    book = await service.save(data)

    response.headers.update(
        EntityAlert(ENTITY_NAME, data.id, AlertAction.UPDATED).to_headers()
    )
    return BookRead.model_validate(book)


@router.get(
    "",
    response_model=list[BookRead],
    summary="Listar livros",
    description="Lista livros paginado. Metadados de paginação vão nos headers.",
)
async def list_books(
    request: Request,
    response: Response,
    service: BookServiceDep,
    page_request: Pageable,
) -> list[BookRead]:
    """
    Lista uma página de livros.

    Parâmetros de query:
        - page: Número da página (começa em 0)
        - size: Itens por página
        - sort: campo[,asc|desc], pode ser repetido
    """
    logger.debug("Requisição REST para listar uma página de Books")
    page = await service.find_all(page_request)
    response.headers.update(pagination_headers(page, request.url.path))
    return [BookRead.model_validate(b) for b in page.items]


@router.get(
    "/author/{author_id}",
    response_model=list[BookRead],
    summary="Listar livros de um autor",
    description="Lista livros de um autor. Autor inexistente retorna lista vazia.",
)
async def list_books_by_author(
    author_id: int,
    request: Request,
    response: Response,
    service: BookServiceDep,
    page_request: Pageable,
) -> list[BookRead]:
    """Lista uma página de livros do autor."""
    logger.debug(f"Requisição REST para listar Books do autor: {author_id}")
    page = await service.get_books_by_author(author_id, page_request)
    response.headers.update(pagination_headers(page, request.url.path))
    return [BookRead.model_validate(b) for b in page.items]


@router.get(
    "/publisher/{publisher_id}",
    response_model=list[BookRead],
    summary="Listar livros de uma editora",
    description="Lista livros de uma editora. Editora inexistente retorna lista vazia.",
)
async def list_books_by_publisher(
    publisher_id: int,
    request: Request,
    response: Response,
    service: BookServiceDep,
    page_request: Pageable,
) -> list[BookRead]:
    """Lista uma página de livros da editora."""
    logger.debug(f"Requisição REST para listar Books da editora: {publisher_id}")
    page = await service.get_books_by_publisher(publisher_id, page_request)
    response.headers.update(pagination_headers(page, request.url.path))
    return [BookRead.model_validate(b) for b in page.items]


@router.get(
    "/{book_id}",
    response_model=BookRead,
    summary="Buscar livro",
    description="Busca livro por ID.",
)
async def get_book(
    book_id: int,
    service: BookServiceDep,
) -> BookRead:
    """
    Retorna um livro específico.

    Raises:
        404: Livro não encontrado
    """
    logger.debug(f"Requisição REST para buscar Book: {book_id}")
    book = await service.find_one(book_id)
    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Livro não encontrado",
        )
    return BookRead.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    dependencies=[Depends(rate_limit_write)],
    summary="Remover livro",
    description="Remove livro e seus comentários. ID inexistente não gera erro.",
)
async def delete_book(
    book_id: int,
    service: BookServiceDep,
) -> Response:
    """Remove livro do catálogo."""
    logger.debug(f"Requisição REST para remover Book: {book_id}")
    await service.delete(book_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=EntityAlert(ENTITY_NAME, book_id, AlertAction.DELETED).to_headers(),
    )
