from podium.backend.app.core.config import settings
from podium.backend.app.core.deps import get_file_storage, get_identity_provider

__all__ = ['settings',
           'get_file_storage',
           'get_identity_provider']
