from podium.backend.app.domain.files.entities import StoredFile
from podium.backend.app.domain.files.errors import (
    InvalidUploadRequest,
    UnsupportedFileType,
    FailedToSaveFile,
    FailedToListFiles,
    StoredFileNotFound,
)
from podium.backend.app.domain.files.value_objects import (
    FileCategory,
    mime_type_for,
    upload_directory,
    ListingScope,
    listing_scope,
)

__all__ = ['StoredFile', 'FileCategory', 'mime_type_for', 'upload_directory', 'ListingScope', 'listing_scope',
           'InvalidUploadRequest', 'UnsupportedFileType', 'FailedToSaveFile', 'FailedToListFiles',
           'StoredFileNotFound']
