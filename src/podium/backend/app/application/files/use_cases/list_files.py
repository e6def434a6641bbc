from __future__ import annotations

from typing import List

from podium.backend.app.application.files.dto import ListFilesInputDTO, StoredFileDTO
from podium.backend.app.application.files.mappers import stored_file_domain_to_output_dto
from podium.backend.app.domain.auth import FileAccessForbidden, NotAuthenticated
from podium.backend.app.domain.files import FailedToListFiles, listing_scope
from podium.backend.app.domain.files.interfaces import FileStorage


class ListFilesUseCase:
    def __init__(self, file_storage: FileStorage) -> None:
        self._file_storage = file_storage

    async def execute(self, dto: ListFilesInputDTO) -> List[StoredFileDTO]:
        requested = dto.requested_user_id
        if requested and dto.authenticated_user_id != requested:
            # TODO: allow admins through once roles are readable from the profile store
            if dto.authenticated_user_id:
                raise FileAccessForbidden()
            raise NotAuthenticated()

        scope = listing_scope(requested, dto.file_type)

        try:
            files = await self._file_storage.list_files(
                directory=scope.directory,
                user_id=requested or None,
                exclude=scope.exclude,
                recursive=scope.recursive,
            )
        except OSError as e:
            raise FailedToListFiles(str(e)) from e

        return [stored_file_domain_to_output_dto(f) for f in files]
