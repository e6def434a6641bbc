import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from podium.backend.app.domain.auth import (
    FileAccessForbidden,
    MissingIdToken,
    NotAuthenticated,
    SessionCreationError,
)
from podium.backend.app.domain.files import (
    FailedToListFiles,
    FailedToSaveFile,
    InvalidUploadRequest,
    StoredFileNotFound,
    UnsupportedFileType,
)

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _validation_message(exc: RequestValidationError) -> str:
    messages = [str(e.get("msg", "")) for e in exc.errors()]
    return "; ".join(m for m in messages if m) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        # the session endpoint reports every bad body as a failed exchange
        if request.url.path.endswith("/auth/session"):
            logger.error("Error creating session: %s", message)
            return _error(status.HTTP_401_UNAUTHORIZED, f"Failed to create session: {message}")
        return _error(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(InvalidUploadRequest)
    async def invalid_upload_request(_: Request, exc: InvalidUploadRequest):
        return _error(status.HTTP_400_BAD_REQUEST, str(exc) or "Invalid upload request")

    @app.exception_handler(UnsupportedFileType)
    async def unsupported_file_type(_: Request, exc: UnsupportedFileType):
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(MissingIdToken)
    async def missing_id_token(_: Request, exc: MissingIdToken):
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(SessionCreationError)
    async def session_creation_error(_: Request, exc: SessionCreationError):
        logger.error("Error creating session: %s", exc)
        return _error(status.HTTP_401_UNAUTHORIZED, f"Failed to create session: {exc}")

    @app.exception_handler(NotAuthenticated)
    async def not_authenticated(_: Request, __: NotAuthenticated):
        return _error(status.HTTP_401_UNAUTHORIZED, "Unauthorized")

    @app.exception_handler(FileAccessForbidden)
    async def file_access_forbidden(_: Request, __: FileAccessForbidden):
        return _error(status.HTTP_403_FORBIDDEN, "Unauthorized")

    @app.exception_handler(StoredFileNotFound)
    async def stored_file_not_found(_: Request, exc: StoredFileNotFound):
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(FailedToSaveFile)
    async def failed_to_save_file(_: Request, exc: FailedToSaveFile):
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Failed to upload file")

    @app.exception_handler(FailedToListFiles)
    async def failed_to_list_files(_: Request, exc: FailedToListFiles):
        logger.error("Error retrieving files: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(Exception)
    async def unhandled_exception(_: Request, exc: Exception):
        logger.exception("Unhandled exception", exc_info=exc)

        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
