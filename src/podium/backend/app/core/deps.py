from functools import lru_cache
from pathlib import Path

from podium.backend.app.core.config import settings
from podium.backend.app.domain.auth import IdentityProvider
from podium.backend.app.domain.files.interfaces import FileStorage
from podium.backend.app.infrastructure.auth.firebase_identity import FirebaseIdentityProvider
from podium.backend.app.infrastructure.files.filesystem_storage import FilesystemFileStorage


@lru_cache
def get_file_storage() -> FileStorage:
    """
    Singleton file storage instance.
    Swap implementation here (FS / object storage) without touching use cases.
    """
    public_dir = Path(settings.PUBLIC_DIR)
    storage = FilesystemFileStorage(public_dir)
    storage.base_dir.mkdir(parents=True, exist_ok=True)
    return storage


@lru_cache
def get_identity_provider() -> IdentityProvider:
    return FirebaseIdentityProvider(settings)
