import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from models import Member
from schemas.member import (
    BirthdayListResponse,
    MemberCreateRequest,
    MemberListResponse,
    MemberRecord,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _member_to_record(member: Member) -> MemberRecord:
    return MemberRecord(
        id=member.id,
        name=member.name,
        voice=member.voice,
        role=member.role,
        birthday=member.birthday,
    )


@router.get("/members")
def list_members(db: Session = Depends(get_db)) -> dict:
    members = db.query(Member).order_by(Member.name).all()
    return MemberListResponse(members=[_member_to_record(m) for m in members]).model_dump()


@router.post("/members", status_code=201)
def create_member(req: MemberCreateRequest, db: Session = Depends(get_db)) -> dict:
    member = Member(
        name=req.name,
        voice=req.voice,
        role=req.role,
        birthday=req.birthday,
    )
    db.add(member)
    db.commit()
    db.refresh(member)

    logger.info("Created member %s (%r)", member.id, member.name)
    return _member_to_record(member).model_dump()


@router.get("/members/birthdays")
def list_birthdays(
    month: Optional[int] = Query(default=None, ge=1, le=12),
    db: Session = Depends(get_db),
) -> dict:
    if month is None:
        month = date.today().month

    members = db.query(Member).filter(Member.birthday.isnot(None)).all()
    matched = sorted(
        (m for m in members if m.birthday.month == month),
        key=lambda m: (m.birthday.day, m.name),
    )
    return BirthdayListResponse(
        month=month,
        members=[_member_to_record(m) for m in matched],
    ).model_dump()
