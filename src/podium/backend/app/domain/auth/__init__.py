from podium.backend.app.domain.auth.errors import (
    InvalidSessionError,
    SessionCreationError,
    MissingIdToken,
    NotAuthenticated,
    FileAccessForbidden,
)
from podium.backend.app.domain.auth.interfaces import IdentityProvider

__all__ = ['IdentityProvider', 'InvalidSessionError', 'SessionCreationError', 'MissingIdToken',
           'NotAuthenticated', 'FileAccessForbidden']
