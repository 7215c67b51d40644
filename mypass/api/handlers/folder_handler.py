"""
Folder Handler

REST endpoints for folders, including sharing a folder with another user.

ENDPOINTS:
==========
    POST   /api/folders                → Create a folder owned by the caller
    PUT    /api/folders                → Update a folder
    GET    /api/folders                → All folders (optionally paged)
    GET    /api/folders/user           → Folders the caller owns or was shared
    GET    /api/folders/{id}           → One folder
    DELETE /api/folders/{id}           → Delete a folder
    POST   /api/folders/share/{id}     → Share a folder by login or email
    GET    /api/_search/folders        → Search folders by name

Mutating endpoints answer with X-mypassApp-alert / X-mypassApp-params
headers (see mypass.api.headers).

SHARING:
========
The body of POST /folders/share/{id} is the target's login or email as raw
text. Quotes are dropped, so both `bob@example.com` and the JSON string
`"bob@example.com"` work. Only the folder's owner may share it; anyone
else gets 400 with error key `notowner`.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from mypass.api.dependencies.auth import CurrentUser
from mypass.api.dependencies.pagination import get_optional_pagination
from mypass.api.dependencies.services import (
    get_folder_service,
    get_secret_service,
    get_user_service,
)
from mypass.api.headers import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)
from mypass.shared.core.exceptions import (
    BadRequestAlertError,
    FolderNotFoundError,
    UserNotFoundError,
)
from mypass.shared.core.logging import get_logger
from mypass.shared.schemas.common import PaginationParams
from mypass.shared.schemas.folder import FolderDTO
from mypass.shared.services.folder_service import FolderService
from mypass.shared.services.secret_service import SecretService
from mypass.shared.services.user_service import UserService


router = APIRouter()

logger = get_logger("mypass.api.folders")

ENTITY_NAME = "folder"


# ═══════════════════════════════════════════════════════════════════════════════
# CREATE / UPDATE
# ═══════════════════════════════════════════════════════════════════════════════


@router.post(
    "/folders",
    response_model=FolderDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_folder(
    folder_dto: FolderDTO,
    response: Response,
    current_user: CurrentUser,
    folder_service: FolderService = Depends(get_folder_service),
    user_service: UserService = Depends(get_user_service),
):
    """
    Create a new folder owned by the caller.

    Raises:
        400: If the folder already has an id
    """
    logger.debug("REST request to save Folder", name=folder_dto.name)
    if folder_dto.id is not None:
        raise BadRequestAlertError("A new folder cannot already have an ID", ENTITY_NAME, "idexists")

    owner = await user_service.get_user_with_authorities_by_login(current_user["login"])
    if owner is None:
        # The folder is still created, without an owner
        logger.error("Could not resolve folder owner", login=current_user["login"])
    else:
        folder_dto.owner_id = owner.id
        folder_dto.owner_login = owner.login

    result = await folder_service.save(folder_dto)

    response.headers["Location"] = f"/api/folders/{result.id}"
    response.headers.update(create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result


@router.put("/folders", response_model=FolderDTO)
async def update_folder(
    folder_dto: FolderDTO,
    response: Response,
    current_user: CurrentUser,
    folder_service: FolderService = Depends(get_folder_service),
):
    """
    Update an existing folder.

    Raises:
        400: If the folder has no id
        404: If no folder has that id
    """
    logger.debug("REST request to update Folder", folder_id=folder_dto.id)
    if folder_dto.id is None:
        raise BadRequestAlertError("Invalid id", ENTITY_NAME, "idnull")

    result = await folder_service.save(folder_dto)

    response.headers.update(create_entity_update_alert(ENTITY_NAME, str(folder_dto.id)))
    return result


# ═══════════════════════════════════════════════════════════════════════════════
# READ
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/folders", response_model=list[FolderDTO])
async def get_all_folders(
    response: Response,
    current_user: CurrentUser,
    eagerload: bool = Query(False, description="Accepted for compatibility, folders are always eager"),
    pagination: Optional[PaginationParams] = Depends(get_optional_pagination),
    folder_service: FolderService = Depends(get_folder_service),
):
    """
    Get all the folders.

    With `page` or `size` the result is one page and the total number of
    folders is returned in X-Total-Count.
    """
    logger.debug("REST request to get all Folders", eagerload=eagerload)
    if pagination is None:
        return await folder_service.find_all()

    folders, total = await folder_service.find_all_paged(pagination.page, pagination.size)
    response.headers["X-Total-Count"] = str(total)
    return folders


@router.get("/folders/user", response_model=list[FolderDTO])
async def get_current_user_folders(
    current_user: CurrentUser,
    eagerload: bool = Query(False, description="Attach each folder's secrets"),
    folder_service: FolderService = Depends(get_folder_service),
    secret_service: SecretService = Depends(get_secret_service),
):
    """
    Get the folders the caller owns or that were shared with the caller.

    Secrets are only included when `eagerload=true`.
    """
    logger.debug("REST request to get Folders of current user", login=current_user["login"])
    folders = await folder_service.get_current_user_folders(current_user["login"])
    if eagerload:
        for folder in folders:
            folder.secrets = await secret_service.get_folder_secrets(folder.id)
    return folders


@router.get("/folders/{folder_id}", response_model=FolderDTO)
async def get_folder(
    folder_id: int,
    current_user: CurrentUser,
    folder_service: FolderService = Depends(get_folder_service),
):
    """
    Get one folder.

    Raises:
        404: If the folder does not exist
    """
    logger.debug("REST request to get Folder", folder_id=folder_id)
    folder = await folder_service.find_one(folder_id)
    if folder is None:
        raise FolderNotFoundError(folder_id)
    return folder


@router.get("/_search/folders", response_model=list[FolderDTO])
async def search_folders(
    current_user: CurrentUser,
    query: str = Query(..., description="Text the folder name must contain"),
    folder_service: FolderService = Depends(get_folder_service),
):
    """Search folders by name, case-insensitive."""
    logger.debug("REST request to search Folders", query=query)
    return await folder_service.search(query)


# ═══════════════════════════════════════════════════════════════════════════════
# DELETE
# ═══════════════════════════════════════════════════════════════════════════════


@router.delete("/folders/{folder_id}")
async def delete_folder(
    folder_id: int,
    response: Response,
    current_user: CurrentUser,
    folder_service: FolderService = Depends(get_folder_service),
) -> None:
    """
    Delete a folder.

    A folder that still holds secrets cannot be deleted (500).
    """
    logger.debug("REST request to delete Folder", folder_id=folder_id)
    await folder_service.delete(folder_id)
    response.headers.update(create_entity_deletion_alert(ENTITY_NAME, str(folder_id)))


# ═══════════════════════════════════════════════════════════════════════════════
# SHARE
# ═══════════════════════════════════════════════════════════════════════════════


@router.post("/folders/share/{folder_id}", response_model=FolderDTO)
async def share_folder(
    folder_id: int,
    request: Request,
    response: Response,
    current_user: CurrentUser,
    folder_service: FolderService = Depends(get_folder_service),
    user_service: UserService = Depends(get_user_service),
):
    """
    Share a folder with another user.

    Body:
        The target user's login or email, raw or as a JSON string

    Raises:
        404: If the folder or the target user does not exist
        400: If the caller does not own the folder, or the body is not UTF-8
    """
    try:
        raw_target = (await request.body()).decode("utf-8")
    except UnicodeDecodeError as e:
        raise BadRequestAlertError("Share target must be UTF-8 text", ENTITY_NAME, "invalidtarget") from e
    logger.info("Share folder with", target=raw_target)
    target = raw_target.replace('"', "").strip()

    logger.debug("REST request to share Folder", folder_id=folder_id)

    folder = await folder_service.find_one(folder_id)
    if folder is None:
        raise FolderNotFoundError(folder_id)

    if folder.owner_login != current_user["login"]:
        raise BadRequestAlertError("Only the owner can share a folder", ENTITY_NAME, "notowner")

    user = await user_service.get_user_with_authorities_by_login(target)
    if user is None:
        raise UserNotFoundError(target)

    folder.add_shared_with(user)
    result = await folder_service.save(folder)

    response.headers.update(create_entity_update_alert(ENTITY_NAME, str(folder.id)))
    return result
