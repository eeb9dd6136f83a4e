from typing import List, Optional

from pydantic import BaseModel, field_validator


class RosterCreateRequest(BaseModel):
    month: int
    year: int

    @field_validator("month")
    @classmethod
    def month_in_range(cls, v: int) -> int:
        if not 1 <= v <= 12:
            raise ValueError("month must be between 1 and 12")
        return v

    @field_validator("year")
    @classmethod
    def year_in_range(cls, v: int) -> int:
        if not 2000 <= v <= 2100:
            raise ValueError("year must be between 2000 and 2100")
        return v


class RosterRecord(BaseModel):
    id: str
    month: int
    year: int
    approved: bool
    created_at: Optional[str] = None


class RosterListResponse(BaseModel):
    rosters: List[RosterRecord]
