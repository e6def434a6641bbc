from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ..common import utcnow


@dataclass(frozen=True, slots=True)
class StoredFile:
    id: str
    original_name: str
    file_name: str
    mime_type: str
    size: int
    path: str
    url: str
    created_at: datetime = field(default_factory=utcnow)
    user_id: str | None = None
    song_id: str | None = None
