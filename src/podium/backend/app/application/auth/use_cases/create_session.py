from __future__ import annotations

from datetime import timedelta

from podium.backend.app.application.auth.dto import CreateSessionInputDTO, SessionCookieDTO
from podium.backend.app.domain.auth import IdentityProvider, MissingIdToken


class CreateSessionUseCase:
    def __init__(self, identity_provider: IdentityProvider, expires_in: timedelta) -> None:
        self._identity_provider = identity_provider
        self._expires_in = expires_in

    async def execute(self, dto: CreateSessionInputDTO) -> SessionCookieDTO:
        if not dto.id_token:
            raise MissingIdToken()
        # SessionCreationError from the provider propagates to the 401 handler
        value = await self._identity_provider.create_session_cookie(dto.id_token, self._expires_in)
        return SessionCookieDTO(value=value, max_age=self._expires_in)
