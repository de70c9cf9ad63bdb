"""
Endpoints de Editoras.

Contratos:
    - POST /publishers: Cria editora (payload sem id)
    - PUT /publishers: Atualiza editora (payload com id)
    - GET /publishers: Lista editoras paginado
    - GET /publishers/{id}: Busca editora por ID
    - DELETE /publishers/{id}: Remove editora (livros dela ficam sem editora)
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from app.core.alerts import EntityAlert
from app.core.deps import Pageable, PublisherServiceDep
from app.core.errors import BadRequestAlertError
from app.core.logging import get_logger
from app.core.pagination import pagination_headers
from app.core.rate_limit import rate_limit_write
from app.models.enums import AlertAction
from app.schemas.publisher import PublisherDTO, PublisherRead

ENTITY_NAME = "publisher"

logger = get_logger(__name__)
router = APIRouter(prefix="/publishers", tags=["Publishers"])


@router.post(
    "",
    response_model=PublisherRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(rate_limit_write)],
    summary="Criar editora",
)
async def create_publisher(
    data: PublisherDTO,
    request: Request,
    response: Response,
    service: PublisherServiceDep,
) -> PublisherRead:
    """Cria nova editora. O id é gerado pelo servidor."""
    logger.debug(f"Requisição REST para salvar Publisher: {data}")
    if data.id is not None:
        raise BadRequestAlertError(
            "Uma nova editora não pode ter ID",
            entity_name=ENTITY_NAME,
            error_key="idexists",
        )

    publisher = await service.save(data)

    response.headers["Location"] = f"{request.url.path}/{publisher.id}"
    response.headers.update(
        EntityAlert(ENTITY_NAME, publisher.id, AlertAction.CREATED).to_headers()
    )
    return PublisherRead.model_validate(publisher)


@router.put(
    "",
    response_model=PublisherRead,
    dependencies=[Depends(rate_limit_write)],
    summary="Atualizar editora",
)
async def update_publisher(
    data: PublisherDTO,
    response: Response,
    service: PublisherServiceDep,
) -> PublisherRead:
    """
    Substitui os dados da editora identificada pelo id do payload.

    Raises:
        400: Payload sem id (idnull)
        404: Editora não encontrada
    """
    logger.debug(f"Requisição REST para atualizar Publisher: {data}")
    if data.id is None:
        raise BadRequestAlertError(
            "ID inválido",
            entity_name=ENTITY_NAME,
            error_key="idnull",
        )

    publisher = await service.save(data)

    response.headers.update(
        EntityAlert(ENTITY_NAME, data.id, AlertAction.UPDATED).to_headers()
    )
    return PublisherRead.model_validate(publisher)


@router.get(
    "",
    response_model=list[PublisherRead],
    summary="Listar editoras",
)
async def list_publishers(
    request: Request,
    response: Response,
    service: PublisherServiceDep,
    page_request: Pageable,
) -> list[PublisherRead]:
    logger.debug("Requisição REST para listar uma página de Publishers")
    page = await service.find_all(page_request)
    response.headers.update(pagination_headers(page, request.url.path))
    return [PublisherRead.model_validate(p) for p in page.items]


@router.get(
    "/{publisher_id}",
    response_model=PublisherRead,
    summary="Buscar editora",
)
async def get_publisher(
    publisher_id: int,
    service: PublisherServiceDep,
) -> PublisherRead:
    logger.debug(f"Requisição REST para buscar Publisher: {publisher_id}")
    publisher = await service.find_one(publisher_id)
    if publisher is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Editora não encontrada",
        )
    return PublisherRead.model_validate(publisher)


@router.delete(
    "/{publisher_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    dependencies=[Depends(rate_limit_write)],
    summary="Remover editora",
)
async def delete_publisher(
    publisher_id: int,
    service: PublisherServiceDep,
) -> Response:
    logger.debug(f"Requisição REST para remover Publisher: {publisher_id}")
    await service.delete(publisher_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=EntityAlert(ENTITY_NAME, publisher_id, AlertAction.DELETED).to_headers(),
    )
