from __future__ import annotations

from typing import Optional

from fastapi import UploadFile

from podium.backend.app.api.files.schemas import StoredFileResponse
from podium.backend.app.application.files import (
    ListFilesInputDTO,
    StoredFileDTO,
    UploadFileInputDTO,
)


def get_upload_file_input_dto(
        user_id: Optional[str],
        file: UploadFile,
        file_bytes: bytes,
        file_type: str,
        song_id: str,
) -> UploadFileInputDTO:
    return UploadFileInputDTO(
        filename=file.filename or "",
        content=file_bytes,
        content_type=file.content_type or "",
        file_type=file_type,
        song_id=song_id or None,
        user_id=user_id,
    )


def get_list_files_input_dto(
        authenticated_user_id: Optional[str],
        user_id: Optional[str],
        file_type: Optional[str],
) -> ListFilesInputDTO:
    return ListFilesInputDTO(
        requested_user_id=user_id or None,
        authenticated_user_id=authenticated_user_id,
        file_type=file_type or None,
    )


def stored_file_dto_to_response(dto: StoredFileDTO) -> StoredFileResponse:
    return StoredFileResponse.model_validate(dto)


def stored_file_dtos_to_response(dtos: list[StoredFileDTO]) -> list[StoredFileResponse]:
    return [stored_file_dto_to_response(d) for d in dtos]
