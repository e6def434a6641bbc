from __future__ import annotations

import logging
from typing import Optional

from podium.backend.app.domain.auth import IdentityProvider, InvalidSessionError

logger = logging.getLogger(__name__)


class ResolveIdentityUseCase:
    """Maps a session cookie to a uid; any verification failure means anonymous."""

    def __init__(self, identity_provider: IdentityProvider) -> None:
        self._identity_provider = identity_provider

    async def execute(self, session_cookie: Optional[str]) -> Optional[str]:
        if not session_cookie:
            logger.debug("No session cookie found")
            return None
        try:
            user_id = await self._identity_provider.verify_session_cookie(session_cookie)
        except InvalidSessionError as e:
            logger.warning("Session verification failed: %s", e)
            return None
        logger.debug("Authenticated user: %s", user_id)
        return user_id
