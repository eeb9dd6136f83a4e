from typing import List, Optional

from pydantic import BaseModel, field_validator

from services.theory import parse_key


class SongCreateRequest(BaseModel):
    title: str
    original_key: Optional[str] = None
    link: Optional[str] = None
    notes: Optional[str] = None
    chart: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v.strip()

    @field_validator("original_key")
    @classmethod
    def original_key_must_be_known(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        v = v.strip()
        parse_key(v)
        return v


class ChartUpdateRequest(BaseModel):
    chart: str


class SongRecord(BaseModel):
    id: str
    title: str
    original_key: Optional[str] = None
    link: Optional[str] = None
    notes: Optional[str] = None
    chart: Optional[str] = None
    created_at: Optional[str] = None


class SongListResponse(BaseModel):
    songs: List[SongRecord]
