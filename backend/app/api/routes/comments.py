"""
Endpoints de Comentários.

Contratos:
    - POST /comments: Cria comentário (payload sem id, book_id obrigatório)
    - PUT /comments: Atualiza comentário (payload com id)
    - GET /comments: Lista comentários paginado
    - GET /comments/{id}: Busca comentário por ID
    - DELETE /comments/{id}: Remove comentário
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from app.core.alerts import EntityAlert
from app.core.deps import CommentServiceDep, Pageable
from app.core.errors import BadRequestAlertError
from app.core.logging import get_logger
from app.core.pagination import pagination_headers
from app.core.rate_limit import rate_limit_write
from app.models.enums import AlertAction
from app.schemas.comment import CommentDTO, CommentRead

ENTITY_NAME = "comment"

logger = get_logger(__name__)
router = APIRouter(prefix="/comments", tags=["Comments"])


@router.post(
    "",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(rate_limit_write)],
    summary="Criar comentário",
)
async def create_comment(
    data: CommentDTO,
    request: Request,
    response: Response,
    service: CommentServiceDep,
) -> CommentRead:
    """
    Cria comentário sobre um livro.

    Raises:
        400: Payload com id (idexists) ou livro inexistente (booknotfound)
    """
    logger.debug(f"Requisição REST para salvar Comment: {data}")
    if data.id is not None:
        raise BadRequestAlertError(
            "Um novo comentário não pode ter ID",
            entity_name=ENTITY_NAME,
            error_key="idexists",
        )

    comment = await service.save(data)

    response.headers["Location"] = f"{request.url.path}/{comment.id}"
    response.headers.update(
        EntityAlert(ENTITY_NAME, comment.id, AlertAction.CREATED).to_headers()
    )
    return CommentRead.model_validate(comment)


@router.put(
    "",
    response_model=CommentRead,
    dependencies=[Depends(rate_limit_write)],
    summary="Atualizar comentário",
)
async def update_comment(
    data: CommentDTO,
    response: Response,
    service: CommentServiceDep,
) -> CommentRead:
    logger.debug(f"Requisição REST para atualizar Comment: {data}")
    if data.id is None:
        raise BadRequestAlertError(
            "ID inválido",
            entity_name=ENTITY_NAME,
            error_key="idnull",
        )

    comment = await service.save(data)

    response.headers.update(
        EntityAlert(ENTITY_NAME, data.id, AlertAction.UPDATED).to_headers()
    )
    return CommentRead.model_validate(comment)


@router.get(
    "",
    response_model=list[CommentRead],
    summary="Listar comentários",
)
async def list_comments(
    request: Request,
    response: Response,
    service: CommentServiceDep,
    page_request: Pageable,
) -> list[CommentRead]:
    logger.debug("Requisição REST para listar uma página de Comments")
    page = await service.find_all(page_request)
    response.headers.update(pagination_headers(page, request.url.path))
    return [CommentRead.model_validate(c) for c in page.items]


@router.get(
    "/{comment_id}",
    response_model=CommentRead,
    summary="Buscar comentário",
)
async def get_comment(
    comment_id: int,
    service: CommentServiceDep,
) -> CommentRead:
    logger.debug(f"Requisição REST para buscar Comment: {comment_id}")
    comment = await service.find_one(comment_id)
    if comment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comentário não encontrado",
        )
    return CommentRead.model_validate(comment)


@router.delete(
    "/{comment_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    dependencies=[Depends(rate_limit_write)],
    summary="Remover comentário",
)
async def delete_comment(
    comment_id: int,
    service: CommentServiceDep,
) -> Response:
    logger.debug(f"Requisição REST para remover Comment: {comment_id}")
    await service.delete(comment_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=EntityAlert(ENTITY_NAME, comment_id, AlertAction.DELETED).to_headers(),
    )
