from podium.backend.app.application.files.dto import (
    UploadFileInputDTO,
    ListFilesInputDTO,
    GetStoredFileInputDTO,
    StoredFileDTO,
    StoredFileContentDTO,
)

__all__ = ['UploadFileInputDTO', 'ListFilesInputDTO', 'GetStoredFileInputDTO', 'StoredFileDTO',
           'StoredFileContentDTO']
