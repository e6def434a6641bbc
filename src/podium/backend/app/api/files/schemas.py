from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StoredFileResponse(BaseModel):
    """Upload/listing record, serialized with camelCase keys."""
    id: str
    original_name: str
    file_name: str
    mime_type: str
    size: int
    path: str
    url: str
    created_at: datetime
    user_id: Optional[str] = None
    song_id: Optional[str] = None

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
