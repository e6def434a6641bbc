from typing import Annotated

from fastapi import Depends

from podium.backend.app.application.files.use_cases import (
    GetStoredFileUseCase,
    ListFilesUseCase,
    UploadFileUseCase,
)
from podium.backend.app.core.deps import get_file_storage
from podium.backend.app.domain.files.interfaces import FileStorage


async def get_upload_file_use_case(
        storage: Annotated[FileStorage, Depends(get_file_storage)]
) -> UploadFileUseCase:
    return UploadFileUseCase(storage)


async def get_list_files_use_case(
        storage: Annotated[FileStorage, Depends(get_file_storage)]
) -> ListFilesUseCase:
    return ListFilesUseCase(storage)


async def get_get_stored_file_use_case(
        storage: Annotated[FileStorage, Depends(get_file_storage)]
) -> GetStoredFileUseCase:
    return GetStoredFileUseCase(storage)
