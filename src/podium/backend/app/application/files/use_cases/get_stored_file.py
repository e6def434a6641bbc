from __future__ import annotations

from podium.backend.app.application.files.dto import GetStoredFileInputDTO, StoredFileContentDTO
from podium.backend.app.application.files.mappers import stored_file_domain_to_output_dto
from podium.backend.app.domain.files import StoredFileNotFound
from podium.backend.app.domain.files.interfaces import FileStorage


class GetStoredFileUseCase:
    def __init__(self, file_storage: FileStorage) -> None:
        self._file_storage = file_storage

    async def execute(self, dto: GetStoredFileInputDTO) -> StoredFileContentDTO:
        stored = await self._file_storage.find(file_id=dto.file_id)
        if stored is None:
            raise StoredFileNotFound(dto.file_id)
        return StoredFileContentDTO(
            file=stored_file_domain_to_output_dto(stored),
            absolute_path=str(self._file_storage.absolute_path(stored)),
        )
