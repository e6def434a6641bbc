from datetime import timedelta
from typing import Protocol


class IdentityProvider(Protocol):
    async def create_session_cookie(self, id_token: str, expires_in: timedelta) -> str:
        ...

    async def verify_session_cookie(self, session_cookie: str) -> str:
        """Returns the uid the cookie was issued for."""
        ...
