from datetime import date
from typing import List, Optional

from pydantic import BaseModel, field_validator


class MemberCreateRequest(BaseModel):
    name: str
    voice: Optional[str] = None
    role: Optional[str] = None
    birthday: Optional[date] = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v.strip()


class MemberRecord(BaseModel):
    id: str
    name: str
    voice: Optional[str] = None
    role: Optional[str] = None
    birthday: Optional[date] = None


class MemberListResponse(BaseModel):
    members: List[MemberRecord]


class BirthdayListResponse(BaseModel):
    month: int
    members: List[MemberRecord]
