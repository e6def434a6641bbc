class InvalidUploadRequest(Exception):
    pass


class UnsupportedFileType(Exception):
    def __init__(self, file_type: str):
        super().__init__(f"Unsupported file type: {file_type}")


class FailedToSaveFile(Exception):
    def __init__(self, reason: str):
        super().__init__(f"Failed to upload file: {reason}")


class FailedToListFiles(Exception):
    def __init__(self, reason: str):
        super().__init__(f"Failed to retrieve files: {reason}")


class StoredFileNotFound(Exception):
    def __init__(self, file_id: str):
        super().__init__(f"File {file_id} not found")
