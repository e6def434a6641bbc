import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile
from fastapi.responses import FileResponse

from podium.backend.app.api.files.deps import (
    get_get_stored_file_use_case,
    get_list_files_use_case,
    get_upload_file_use_case,
)
from podium.backend.app.api.files.mappers import (
    get_list_files_input_dto,
    get_upload_file_input_dto,
    stored_file_dto_to_response,
    stored_file_dtos_to_response,
)
from podium.backend.app.api.files.schemas import StoredFileResponse
from podium.backend.app.api.session.deps import get_optional_user_id
from podium.backend.app.application.files import GetStoredFileInputDTO
from podium.backend.app.application.files.use_cases import (
    GetStoredFileUseCase,
    ListFilesUseCase,
    UploadFileUseCase,
)
from podium.backend.app.domain.files import InvalidUploadRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["files"])

optional_user_dep = Annotated[Optional[str], Depends(get_optional_user_id)]
upload_file_dep = Annotated[UploadFileUseCase, Depends(get_upload_file_use_case)]
list_files_dep = Annotated[ListFilesUseCase, Depends(get_list_files_use_case)]
get_stored_file_dep = Annotated[GetStoredFileUseCase, Depends(get_get_stored_file_use_case)]


@router.post("/upload", response_model=StoredFileResponse)
async def upload_file(
        request: Request,
        user_id: optional_user_dep,
        use_case: upload_file_dep,
        file: Annotated[Optional[UploadFile], File()] = None,
        file_type: Annotated[str, Form(alias="fileType")] = "",
        song_id: Annotated[str, Form(alias="songId")] = "",
):
    content_type = request.headers.get("content-type", "")
    if "multipart/form-data" not in content_type:
        raise InvalidUploadRequest("Content type must be multipart/form-data")
    if file is None:
        raise InvalidUploadRequest("No file provided")

    file_bytes = await file.read()
    logger.info("Received upload %s (%d bytes), fileType=%r", file.filename, len(file_bytes), file_type)

    dto = get_upload_file_input_dto(user_id, file, file_bytes, file_type, song_id)
    stored = await use_case.execute(dto)
    return stored_file_dto_to_response(stored)


@router.get("/files", response_model=list[StoredFileResponse])
async def list_files(
        user_id: optional_user_dep,
        use_case: list_files_dep,
        requested_user_id: Annotated[Optional[str], Query(alias="userId")] = None,
        file_type: Annotated[Optional[str], Query(alias="fileType")] = None,
):
    dto = get_list_files_input_dto(user_id, requested_user_id, file_type)
    files = await use_case.execute(dto)
    return stored_file_dtos_to_response(files)


@router.get("/preview/{file_id}")
async def preview_file(
        file_id: str,
        use_case: get_stored_file_dep,
) -> FileResponse:
    found = await use_case.execute(GetStoredFileInputDTO(file_id=file_id))
    return FileResponse(found.absolute_path, media_type=found.file.mime_type)
