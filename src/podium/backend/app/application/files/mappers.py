from __future__ import annotations

from podium.backend.app.application.files.dto import StoredFileDTO
from podium.backend.app.domain.files import StoredFile


def stored_file_domain_to_output_dto(stored: StoredFile) -> StoredFileDTO:
    return StoredFileDTO(
        id=stored.id,
        original_name=stored.original_name,
        file_name=stored.file_name,
        mime_type=stored.mime_type,
        size=stored.size,
        path=stored.path,
        url=stored.url,
        created_at=stored.created_at,
        user_id=stored.user_id,
        song_id=stored.song_id,
    )
