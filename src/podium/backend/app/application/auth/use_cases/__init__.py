from podium.backend.app.application.auth.use_cases.create_session import CreateSessionUseCase
from podium.backend.app.application.auth.use_cases.resolve_identity import ResolveIdentityUseCase

__all__ = ['CreateSessionUseCase', 'ResolveIdentityUseCase']
