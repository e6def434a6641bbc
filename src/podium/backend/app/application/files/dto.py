from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class UploadFileInputDTO:
    filename: str
    content: bytes
    content_type: str
    file_type: str = ""
    song_id: Optional[str] = None
    user_id: Optional[str] = None


@dataclass(frozen=True)
class ListFilesInputDTO:
    requested_user_id: Optional[str]
    authenticated_user_id: Optional[str]
    file_type: Optional[str] = None


@dataclass(frozen=True)
class GetStoredFileInputDTO:
    file_id: str


# ---------- OUTPUT DTOs ----------
@dataclass(frozen=True)
class StoredFileDTO:
    id: str
    original_name: str
    file_name: str
    mime_type: str
    size: int
    path: str
    url: str
    created_at: datetime
    user_id: Optional[str]
    song_id: Optional[str]


@dataclass(frozen=True)
class StoredFileContentDTO:
    file: StoredFileDTO
    absolute_path: str
