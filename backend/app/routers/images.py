from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.concurrency import run_in_threadpool

from app.dependencies import get_gateway
from app.errors import InvalidInput
from app.models.schemas import DeleteResponse, ErrorResponse, PublicFile
from app.services.listing import build_list_options
from app.services.projection import to_public_file
from app.services.storage import MediaGateway
from app.services.uploads import normalize_upload

router = APIRouter(prefix="/images", tags=["images"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get(
    "",
    response_model=List[PublicFile],
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
def list_images(
    limit: Optional[str] = None,
    skip: Optional[str] = None,
    folder: Optional[str] = None,
    path: Optional[str] = None,
    file_type: Optional[str] = Query(None, alias="fileType"),
    gateway: MediaGateway = Depends(get_gateway),
):
    """
    List files, optionally under a folder.

    Out-of-range ``limit``/``skip`` values are clamped and an unknown
    ``fileType`` is ignored. Order is whatever the provider returns.
    """
    options = build_list_options(limit, skip, folder, path, file_type)
    return [to_public_file(record) for record in gateway.list_files(options)]


@router.get(
    "/{file_id}",
    response_model=PublicFile,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def get_image(file_id: str, gateway: MediaGateway = Depends(get_gateway)):
    """
    Get the details of a single file.
    """
    if not file_id:
        raise InvalidInput("Missing fileId")
    return to_public_file(gateway.get_details(file_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PublicFile,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def upload_image(request: Request, gateway: MediaGateway = Depends(get_gateway)):
    """
    Upload a file sent either as multipart form data (``file`` or ``image``)
    or as a JSON body carrying base64 in ``file`` or ``base64``.
    """
    upload = await normalize_upload(request)
    record = await run_in_threadpool(
        gateway.upload, upload.payload, upload.file_name, upload.folder
    )
    return to_public_file(record)


@router.delete("/{file_id}", response_model=DeleteResponse, responses=ERROR_RESPONSES)
def delete_image(file_id: str, gateway: MediaGateway = Depends(get_gateway)):
    """
    Delete a file by its provider id.
    """
    if not file_id:
        raise InvalidInput("Missing fileId")
    gateway.delete(file_id)
    return DeleteResponse(id=file_id)
