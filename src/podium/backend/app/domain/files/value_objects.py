from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import PurePosixPath

from .errors import UnsupportedFileType

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES: dict[str, str] = {
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".ogg": "audio/ogg",
    ".flac": "audio/flac",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}

USERS_DIR = "users"


def mime_type_for(file_name: str) -> str:
    ext = PurePosixPath(file_name).suffix.lower()
    return MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)


class FileCategory(StrEnum):
    AUDIO = "audio"
    IMAGES = "images"
    MISC = "misc"

    @classmethod
    def from_upload(cls, file_type: str | None) -> "FileCategory":
        """Uploads never fail on the tag: unknown values land in misc."""
        if file_type == "audio":
            return cls.AUDIO
        if file_type == "image":
            return cls.IMAGES
        return cls.MISC

    @classmethod
    def from_filter(cls, file_type: str) -> "FileCategory":
        """Listing filters are strict, they become part of a filesystem path."""
        normalized = file_type.strip().lower()
        if normalized == "image":
            normalized = "images"
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedFileType(file_type) from None


def upload_directory(user_id: str | None, file_type: str | None) -> str:
    """
    Relative directory (posix style, "" for the uploads root) an upload is
    written to.

    Authenticated uploads are grouped per user, anonymous ones go to a flat
    audio/images directory or to the root.
    """
    category = FileCategory.from_upload(file_type)
    if user_id:
        return f"{USERS_DIR}/{user_id}/{category.value}"
    if category is FileCategory.MISC:
        return ""
    return category.value


@dataclass(frozen=True)
class ListingScope:
    directory: str
    recursive: bool = True
    exclude: tuple[str, ...] = ()


def listing_scope(user_id: str | None, file_type: str | None) -> ListingScope:
    """Where a listing looks, mirroring where upload_directory() writes."""
    category = FileCategory.from_filter(file_type) if file_type else None
    if user_id:
        directory = f"{USERS_DIR}/{user_id}"
        if category is not None:
            directory = f"{directory}/{category.value}"
        return ListingScope(directory)
    if category is FileCategory.MISC:
        # anonymous misc uploads sit directly in the uploads root
        return ListingScope("", recursive=False)
    if category is not None:
        return ListingScope(category.value)
    # the per-user tree is never part of a public listing
    return ListingScope("", exclude=(USERS_DIR,))
