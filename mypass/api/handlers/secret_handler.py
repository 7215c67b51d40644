"""
Secret Handler

REST endpoints for secrets.

ENDPOINTS:
==========
    POST   /api/secrets                      → Create a secret in a folder
    PUT    /api/secrets                      → Update a secret
    GET    /api/secrets                      → All secrets
    GET    /api/secrets/{id}                 → One secret
    GET    /api/secrets/folder/{folder_id}   → Secrets of one folder
    DELETE /api/secrets/{id}                 → Delete a secret
"""

from fastapi import APIRouter, Depends, Response, status

from mypass.api.dependencies.auth import CurrentUser
from mypass.api.dependencies.services import get_secret_service
from mypass.api.headers import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)
from mypass.shared.core.exceptions import BadRequestAlertError, SecretNotFoundError
from mypass.shared.core.logging import get_logger
from mypass.shared.schemas.secret import SecretDTO
from mypass.shared.services.secret_service import SecretService


router = APIRouter()

logger = get_logger("mypass.api.secrets")

ENTITY_NAME = "secret"


@router.post(
    "/secrets",
    response_model=SecretDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_secret(
    secret_dto: SecretDTO,
    response: Response,
    current_user: CurrentUser,
    secret_service: SecretService = Depends(get_secret_service),
):
    """
    Create a new secret.

    Raises:
        400: If the secret already has an id
        404: If the folder does not exist
    """
    logger.debug("REST request to save Secret", folder_id=secret_dto.folder_id)
    if secret_dto.id is not None:
        raise BadRequestAlertError("A new secret cannot already have an ID", ENTITY_NAME, "idexists")

    result = await secret_service.save(secret_dto)

    response.headers["Location"] = f"/api/secrets/{result.id}"
    response.headers.update(create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result


@router.put("/secrets", response_model=SecretDTO)
async def update_secret(
    secret_dto: SecretDTO,
    response: Response,
    current_user: CurrentUser,
    secret_service: SecretService = Depends(get_secret_service),
):
    """
    Update an existing secret.

    Raises:
        400: If the secret has no id
        404: If the secret or its folder does not exist
    """
    logger.debug("REST request to update Secret", secret_id=secret_dto.id)
    if secret_dto.id is None:
        raise BadRequestAlertError("Invalid id", ENTITY_NAME, "idnull")

    result = await secret_service.save(secret_dto)

    response.headers.update(create_entity_update_alert(ENTITY_NAME, str(secret_dto.id)))
    return result


@router.get("/secrets", response_model=list[SecretDTO])
async def get_all_secrets(
    current_user: CurrentUser,
    secret_service: SecretService = Depends(get_secret_service),
):
    logger.debug("REST request to get all Secrets")
    return await secret_service.find_all()


@router.get("/secrets/folder/{folder_id}", response_model=list[SecretDTO])
async def get_folder_secrets(
    folder_id: int,
    current_user: CurrentUser,
    secret_service: SecretService = Depends(get_secret_service),
):
    logger.debug("REST request to get Secrets of Folder", folder_id=folder_id)
    return await secret_service.get_folder_secrets(folder_id)


@router.get("/secrets/{secret_id}", response_model=SecretDTO)
async def get_secret(
    secret_id: int,
    current_user: CurrentUser,
    secret_service: SecretService = Depends(get_secret_service),
):
    """
    Get one secret.

    Raises:
        404: If the secret does not exist
    """
    logger.debug("REST request to get Secret", secret_id=secret_id)
    secret = await secret_service.find_one(secret_id)
    if secret is None:
        raise SecretNotFoundError(secret_id)
    return secret


@router.delete("/secrets/{secret_id}")
async def delete_secret(
    secret_id: int,
    response: Response,
    current_user: CurrentUser,
    secret_service: SecretService = Depends(get_secret_service),
) -> None:
    logger.debug("REST request to delete Secret", secret_id=secret_id)
    await secret_service.delete(secret_id)
    response.headers.update(create_entity_deletion_alert(ENTITY_NAME, str(secret_id)))
