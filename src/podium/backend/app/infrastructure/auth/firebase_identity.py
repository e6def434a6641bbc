from __future__ import annotations

import logging
from datetime import timedelta

import anyio
import firebase_admin
from firebase_admin import auth, credentials
from firebase_admin.exceptions import FirebaseError

from podium.backend.app.core.config import Settings
from podium.backend.app.domain.auth import InvalidSessionError, SessionCreationError

logger = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"


def build_certificate(settings: Settings) -> dict:
    return {
        "type": "service_account",
        "project_id": settings.FIREBASE_PROJECT_ID,
        "client_email": settings.FIREBASE_CLIENT_EMAIL,
        # env files usually carry the key with literal "\n" sequences
        "private_key": settings.FIREBASE_PRIVATE_KEY.replace("\\n", "\n"),
        "token_uri": TOKEN_URI,
    }


def build_app_options(settings: Settings) -> dict:
    options = {}
    if settings.FIREBASE_DATABASE_URL:
        options["databaseURL"] = settings.FIREBASE_DATABASE_URL
    if settings.FIREBASE_STORAGE_BUCKET:
        options["storageBucket"] = settings.FIREBASE_STORAGE_BUCKET
    return options


class FirebaseIdentityProvider:
    """Session cookies issued and verified by Firebase Auth."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._app: firebase_admin.App | None = None

    def _get_app(self) -> firebase_admin.App:
        if self._app is not None:
            return self._app
        try:
            self._app = firebase_admin.get_app()
        except ValueError:
            try:
                cred = credentials.Certificate(build_certificate(self._settings))
                self._app = firebase_admin.initialize_app(cred, build_app_options(self._settings))
            except (ValueError, IOError):
                logger.exception("Error initializing Firebase Admin SDK")
                raise
        return self._app

    async def create_session_cookie(self, id_token: str, expires_in: timedelta) -> str:
        def _create() -> str:
            return auth.create_session_cookie(id_token, expires_in=expires_in, app=self._get_app())

        try:
            cookie = await anyio.to_thread.run_sync(_create)
        except (FirebaseError, ValueError) as e:
            raise SessionCreationError(str(e)) from e
        return cookie.decode() if isinstance(cookie, bytes) else cookie

    async def verify_session_cookie(self, session_cookie: str) -> str:
        def _verify() -> dict:
            return auth.verify_session_cookie(session_cookie, app=self._get_app())

        try:
            claims = await anyio.to_thread.run_sync(_verify)
        except (FirebaseError, ValueError) as e:
            raise InvalidSessionError(str(e)) from e
        return claims["uid"]
