from __future__ import annotations

import logging

from podium.backend.app.application.files.dto import UploadFileInputDTO, StoredFileDTO
from podium.backend.app.application.files.mappers import stored_file_domain_to_output_dto
from podium.backend.app.domain.files import FailedToSaveFile, upload_directory
from podium.backend.app.domain.files.interfaces import FileStorage

logger = logging.getLogger(__name__)


class UploadFileUseCase:
    def __init__(self, file_storage: FileStorage) -> None:
        self._file_storage = file_storage

    async def execute(self, dto: UploadFileInputDTO) -> StoredFileDTO:
        directory = upload_directory(dto.user_id, dto.file_type)
        logger.info("Using directory: %s", directory or "root")

        params = dict(
            directory=directory,
            filename=dto.filename,
            content=dto.content,
            content_type=dto.content_type,
            user_id=dto.user_id,
            song_id=dto.song_id,
        )

        # 1) primary storage helper
        try:
            stored = await self._file_storage.save(**params)
        except Exception:
            logger.exception("Error in primary save method, attempting direct write")
        else:
            return stored_file_domain_to_output_dto(stored)

        # 2) same directory, low-level write
        try:
            stored = await self._file_storage.save_direct(**params)
        except Exception as e:
            logger.exception("Fallback save failed")
            raise FailedToSaveFile(str(e)) from e

        return stored_file_domain_to_output_dto(stored)
