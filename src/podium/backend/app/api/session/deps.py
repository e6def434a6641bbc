from datetime import timedelta
from typing import Annotated, Optional

from fastapi import Depends, Request

from podium.backend.app.application.auth.use_cases import CreateSessionUseCase, ResolveIdentityUseCase
from podium.backend.app.core.config import settings
from podium.backend.app.core.deps import get_identity_provider
from podium.backend.app.domain.auth import IdentityProvider


async def get_create_session_use_case(
        provider: Annotated[IdentityProvider, Depends(get_identity_provider)],
) -> CreateSessionUseCase:
    return CreateSessionUseCase(provider, timedelta(days=settings.SESSION_EXPIRES_DAYS))


async def get_resolve_identity_use_case(
        provider: Annotated[IdentityProvider, Depends(get_identity_provider)],
) -> ResolveIdentityUseCase:
    return ResolveIdentityUseCase(provider)


async def get_optional_user_id(
        request: Request,
        use_case: Annotated[ResolveIdentityUseCase, Depends(get_resolve_identity_use_case)],
) -> Optional[str]:
    if settings.SKIP_AUTH:
        return settings.DEV_USER_ID
    session_cookie = request.cookies.get(settings.SESSION_COOKIE_NAME)
    return await use_case.execute(session_cookie)
