from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterator
from uuid import uuid4

import anyio

from podium.backend.app.domain.files import StoredFile, mime_type_for

logger = logging.getLogger(__name__)

UPLOADS_DIR_NAME = "uploads"


def _new_file_id() -> str:
    return str(uuid4())


class FilesystemFileStorage:
    """
    Stores uploads under `{public_dir}/uploads` so they can be served as
    static files from `/uploads/...`.

    `save` and `save_direct` share id generation, directory resolution and
    record construction; only the way bytes reach the disk differs.
    """

    def __init__(
        self,
        public_dir: Path,
        *,
        id_factory: Callable[[], str] = _new_file_id,
        url_prefix: str = "/uploads",
    ) -> None:
        self._public_dir = public_dir.resolve()
        self._base_dir = self._public_dir / UPLOADS_DIR_NAME
        # `path` in records is relative to the directory holding `public/`
        self._root_dir = self._public_dir.parent
        self._new_id = id_factory
        self._url_prefix = url_prefix.rstrip("/")

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def _target_dir(self, directory: str) -> Path:
        return self._base_dir / directory if directory else self._base_dir

    @staticmethod
    def _stored_name(file_id: str, filename: str) -> str:
        return f"{file_id}{Path(filename).suffix}"

    def _record(
        self,
        *,
        file_id: str,
        full_path: Path,
        original_name: str,
        mime_type: str,
        size: int,
        created_at: datetime | None = None,
        user_id: str | None = None,
        song_id: str | None = None,
    ) -> StoredFile:
        url_path = full_path.relative_to(self._base_dir).as_posix()
        kwargs = {}
        if created_at is not None:
            kwargs["created_at"] = created_at
        return StoredFile(
            id=file_id,
            original_name=original_name or full_path.name,
            file_name=full_path.name,
            mime_type=mime_type,
            size=size,
            path=full_path.relative_to(self._root_dir).as_posix(),
            url=f"{self._url_prefix}/{url_path}",
            user_id=user_id or None,
            song_id=song_id or None,
            **kwargs,
        )

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
        file_id = self._new_id()
        stored_name = self._stored_name(file_id, filename)

        target_dir = anyio.Path(self._target_dir(directory))
        await target_dir.mkdir(parents=True, exist_ok=True)

        full_path = target_dir / stored_name
        try:
            await full_path.write_bytes(content)

            # make sure the whole payload landed before reporting success
            written = (await full_path.stat()).st_size
            if written != len(content):
                raise OSError(f"Wrote {written} of {len(content)} bytes to {full_path}")
        except BaseException:
            # a partial file would be listed next to the fallback copy
            await full_path.unlink(missing_ok=True)
            raise
        logger.debug("Saved %s (%d bytes)", full_path, written)

        return self._record(
            file_id=file_id,
            full_path=Path(full_path),
            original_name=filename,
            mime_type=content_type or mime_type_for(filename),
            size=written,
            user_id=user_id,
            song_id=song_id,
        )

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
        file_id = self._new_id()
        full_path = self._target_dir(directory) / self._stored_name(file_id, filename)

        await anyio.to_thread.run_sync(self._write_with_os, full_path, content)
        logger.info("Fallback save successful: %s", full_path)

        return self._record(
            file_id=file_id,
            full_path=full_path,
            original_name=filename,
            mime_type=content_type or mime_type_for(filename),
            size=len(content),
            user_id=user_id,
            song_id=song_id,
        )

    @staticmethod
    def _write_with_os(full_path: Path, content: bytes) -> None:
        os.makedirs(full_path.parent, exist_ok=True)
        fd = os.open(full_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        try:
            view = memoryview(content)
            while view:
                n = os.write(fd, view)
                view = view[n:]
        finally:
            os.close(fd)

    async def list_files(
        self,
        *,
        directory: str,
        user_id: str | None = None,
        exclude: tuple[str, ...] = (),
        recursive: bool = True,
    ) -> list[StoredFile]:
        target_dir = self._target_dir(directory)
        return await anyio.to_thread.run_sync(self._scan, target_dir, user_id, exclude, recursive)

    def _scan(
        self,
        target_dir: Path,
        user_id: str | None,
        exclude: tuple[str, ...],
        recursive: bool,
    ) -> list[StoredFile]:
        if not target_dir.is_dir():
            return []
        return [
            self._record_from_disk(p, user_id=user_id)
            for p in self._walk(target_dir, exclude, recursive=recursive)
        ]

    @staticmethod
    def _walk(target_dir: Path, exclude: tuple[str, ...], *, recursive: bool = True) -> Iterator[Path]:
        for current, dirs, files in os.walk(target_dir):
            if not recursive:
                dirs[:] = []
            elif Path(current) == target_dir and exclude:
                dirs[:] = [d for d in dirs if d not in exclude]
            for name in files:
                path = Path(current) / name
                if path.is_file():
                    yield path

    def _record_from_disk(self, full_path: Path, *, user_id: str | None = None) -> StoredFile:
        stats = full_path.stat()
        born = getattr(stats, "st_birthtime", None) or stats.st_ctime
        return self._record(
            file_id=full_path.name.split(".")[0],
            full_path=full_path,
            original_name=full_path.name,
            mime_type=mime_type_for(full_path.name),
            size=stats.st_size,
            created_at=datetime.fromtimestamp(born, tz=timezone.utc),
            user_id=user_id,
        )

    async def find(self, *, file_id: str) -> StoredFile | None:
        return await anyio.to_thread.run_sync(self._find_sync, file_id)

    def _find_sync(self, file_id: str) -> StoredFile | None:
        if not self._base_dir.is_dir():
            return None
        for path in self._walk(self._base_dir, ()):
            if path.name.split(".")[0] == file_id:
                return self._record_from_disk(path)
        return None

    def absolute_path(self, stored: StoredFile) -> Path:
        return self._root_dir / stored.path
