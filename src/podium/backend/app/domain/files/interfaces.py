from pathlib import Path
from typing import Protocol

from podium.backend.app.domain.files.entities import StoredFile


class FileStorage(Protocol):
    async def save(
        self,
        *,
        directory: str,
        filename: str,
        content: bytes,
        content_type: str,
        user_id: str | None = None,
        song_id: str | None = None,
    ) -> StoredFile:
        ...

    async def save_direct(
        self,
        *,
        directory: str,
        filename: str,
        content: bytes,
        content_type: str,
        user_id: str | None = None,
        song_id: str | None = None,
    ) -> StoredFile:
        """
        Fallback write used only when save() failed.
        Must return a record of the same shape as save().
        """
        ...

    async def list_files(
        self,
        *,
        directory: str,
        user_id: str | None = None,
        exclude: tuple[str, ...] = (),
        recursive: bool = True,
    ) -> list[StoredFile]:
        """`exclude` names top-level subdirectories to skip."""
        ...

    async def find(self, *, file_id: str) -> StoredFile | None:
        ...

    def absolute_path(self, stored: StoredFile) -> Path:
        ...
