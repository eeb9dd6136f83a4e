import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator


class ServiceCreateRequest(BaseModel):
    date: datetime.date
    name: str
    song_ids: List[str]

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v.strip()

    @field_validator("song_ids")
    @classmethod
    def song_ids_must_not_be_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("song_ids must contain at least one song")
        return v


class ServiceSongEntry(BaseModel):
    position: int
    song_id: str
    title: str
    original_key: Optional[str] = None


class ServiceRecord(BaseModel):
    id: str
    date: datetime.date
    name: str
    share_slug: str
    share_url: str
    songs: List[ServiceSongEntry]


class ServiceListResponse(BaseModel):
    services: List[ServiceRecord]
