# podium/client/api.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx


class ApiError(RuntimeError):
    """Raised when an HTTP/API error occurs, with a human-readable message."""


def unwrap_error(e: Exception) -> str:
    """Extract a human-readable error message from httpx exceptions."""
    if isinstance(e, httpx.HTTPStatusError):
        # The request reached the server, but the response had an error code
        try:
            data = e.response.json()
            detail = data.get("error") or data.get("detail") if isinstance(data, dict) else data
            return f"{e.response.status_code} {e.response.reason_phrase}: {detail}"
        except ValueError:
            return f"{e.response.status_code} {e.response.reason_phrase}"

    elif isinstance(e, httpx.TimeoutException):
        return "Request timed out."

    elif isinstance(e, httpx.ConnectError):
        return "Failed to connect to server. Is it running?"

    elif isinstance(e, httpx.RequestError):
        # DNS failures, protocol errors, etc.
        return f"Request failed: {e.__class__.__name__}: {e}"

    else:
        return str(e)


def handle_httpx_errors(func):
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except httpx.HTTPError as e:
            raise ApiError(unwrap_error(e)) from e

    return wrapper


class PodiumApi:
    """
    Thin API client for the Podium backend.

      POST   /auth/session  -> sets the `session` cookie
      DELETE /auth/session  -> clears it
      POST   /upload        -> stored file JSON
      GET    /files         -> list of stored file JSON

    The session cookie lives in the underlying client's cookie jar, so calls
    made after create_session() are authenticated.
    """

    def __init__(
            self,
            base_url: str = "http://localhost:8000/api",
            timeout: float = 30.0,
            client: Optional[httpx.Client] = None,
    ):
        # base_url should already include "/api"; an injected client must carry its own
        if client is None:
            client = httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout)
        self._client = client

    def close(self) -> None:
        self._client.close()

    # ---------- Session endpoints ----------

    @handle_httpx_errors
    def create_session(self, id_token: str) -> bool:
        """Exchange an identity-provider ID token for a session cookie."""
        resp = self._client.post("/auth/session", json={"idToken": id_token})
        resp.raise_for_status()
        return bool(resp.json().get("success"))

    @handle_httpx_errors
    def clear_session(self) -> bool:
        resp = self._client.delete("/auth/session")
        resp.raise_for_status()
        return bool(resp.json().get("success"))

    # ---------- File endpoints ----------

    @handle_httpx_errors
    def upload_file(
            self,
            *,
            file_name: str,
            file_bytes: bytes,
            content_type: str = "application/octet-stream",
            file_type: Optional[str] = None,
            song_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        POST /upload
        Backend expects multipart/form-data:
          - file: the binary part
          - fileType: "audio" | "image" (optional)
          - songId: associated song (optional)
        """
        files = {
            "file": (file_name, file_bytes, content_type),
        }
        data: Dict[str, str] = {}
        if file_type:
            data["fileType"] = file_type
        if song_id:
            data["songId"] = song_id

        resp = self._client.post("/upload", data=data, files=files)
        resp.raise_for_status()
        return resp.json()

    @handle_httpx_errors
    def list_user_files(self, user_id: str, file_type: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"userId": user_id}
        if file_type:
            params["fileType"] = file_type
        resp = self._client.get("/files", params=params)
        resp.raise_for_status()
        return resp.json()

    @handle_httpx_errors
    def list_public_files(self, file_type: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"fileType": file_type} if file_type else None
        resp = self._client.get("/files", params=params)
        resp.raise_for_status()
        return resp.json()
