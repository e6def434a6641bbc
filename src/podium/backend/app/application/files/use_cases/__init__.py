from podium.backend.app.application.files.use_cases.upload_file import UploadFileUseCase
from podium.backend.app.application.files.use_cases.list_files import ListFilesUseCase
from podium.backend.app.application.files.use_cases.get_stored_file import GetStoredFileUseCase

__all__ = ['UploadFileUseCase', 'ListFilesUseCase', 'GetStoredFileUseCase']
