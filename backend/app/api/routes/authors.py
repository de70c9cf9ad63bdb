"""
Endpoints de Autores.

Contratos:
    - POST /authors: Cria autor (payload sem id)
    - PUT /authors: Atualiza autor (payload com id)
    - GET /authors: Lista autores paginado
    - GET /authors/{id}: Busca autor por ID
    - DELETE /authors/{id}: Remove autor (livros dele ficam sem autor)

Status codes:
    - 200: Sucesso
    - 201: Criado com sucesso
    - 400: idexists, idnull ou ordenação inválida
    - 404: Autor não encontrado
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from app.core.alerts import EntityAlert
from app.core.deps import AuthorServiceDep, Pageable
from app.core.errors import BadRequestAlertError
from app.core.logging import get_logger
from app.core.pagination import pagination_headers
from app.core.rate_limit import rate_limit_write
from app.models.enums import AlertAction
from app.schemas.author import AuthorDTO, AuthorRead

ENTITY_NAME = "author"

logger = get_logger(__name__)
router = APIRouter(prefix="/authors", tags=["Authors"])


@router.post(
    "",
    response_model=AuthorRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(rate_limit_write)],
    summary="Criar autor",
)
async def create_author(
    data: AuthorDTO,
    request: Request,
    response: Response,
    service: AuthorServiceDep,
) -> AuthorRead:
    """Cria novo autor. O id é gerado pelo servidor."""
    logger.debug(f"Requisição REST para salvar Author: {data}")
    if data.id is not None:
        raise BadRequestAlertError(
            "Um novo autor não pode ter ID",
            entity_name=ENTITY_NAME,
            error_key="idexists",
        )

    author = await service.save(data)

    response.headers["Location"] = f"{request.url.path}/{author.id}"
    response.headers.update(
        EntityAlert(ENTITY_NAME, author.id, AlertAction.CREATED).to_headers()
    )
    return AuthorRead.model_validate(author)


@router.put(
    "",
    response_model=AuthorRead,
    dependencies=[Depends(rate_limit_write)],
    summary="Atualizar autor",
)
async def update_author(
    data: AuthorDTO,
    response: Response,
    service: AuthorServiceDep,
) -> AuthorRead:
    """
    Substitui os dados do autor identificado pelo id do payload.

    Raises:
        400: Payload sem id (idnull)
        404: Autor não encontrado
    """
    logger.debug(f"Requisição REST para atualizar Author: {data}")
    if data.id is None:
        raise BadRequestAlertError(
            "ID inválido",
            entity_name=ENTITY_NAME,
            error_key="idnull",
        )

    author = await service.save(data)

    response.headers.update(
        EntityAlert(ENTITY_NAME, data.id, AlertAction.UPDATED).to_headers()
    )
    return AuthorRead.model_validate(author)


@router.get(
    "",
    response_model=list[AuthorRead],
    summary="Listar autores",
)
async def list_authors(
    request: Request,
    response: Response,
    service: AuthorServiceDep,
    page_request: Pageable,
) -> list[AuthorRead]:
    """Lista uma página de autores; metadados de paginação nos headers."""
    logger.debug("Requisição REST para listar uma página de Authors")
    page = await service.find_all(page_request)
    response.headers.update(pagination_headers(page, request.url.path))
    return [AuthorRead.model_validate(a) for a in page.items]


@router.get(
    "/{author_id}",
    response_model=AuthorRead,
    summary="Buscar autor",
)
async def get_author(
    author_id: int,
    service: AuthorServiceDep,
) -> AuthorRead:
    """
    Retorna dados de um autor específico.

    Raises:
        404: Autor não encontrado
    """
    logger.debug(f"Requisição REST para buscar Author: {author_id}")
    author = await service.find_one(author_id)
    if author is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Autor não encontrado",
        )
    return AuthorRead.model_validate(author)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    dependencies=[Depends(rate_limit_write)],
    summary="Remover autor",
)
async def delete_author(
    author_id: int,
    service: AuthorServiceDep,
) -> Response:
    """Remove autor. Os livros dele permanecem no catálogo sem autor."""
    logger.debug(f"Requisição REST para remover Author: {author_id}")
    await service.delete(author_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=EntityAlert(ENTITY_NAME, author_id, AlertAction.DELETED).to_headers(),
    )
