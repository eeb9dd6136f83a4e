import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from database import get_db
from models import Roster
from schemas.roster import RosterCreateRequest, RosterListResponse, RosterRecord

router = APIRouter()
logger = logging.getLogger(__name__)


def _roster_to_record(roster: Roster) -> RosterRecord:
    return RosterRecord(
        id=roster.id,
        month=roster.month,
        year=roster.year,
        approved=roster.approved,
        created_at=roster.created_at.isoformat() if roster.created_at else None,
    )


@router.get("/rosters")
def list_rosters(db: Session = Depends(get_db)) -> dict:
    rosters = (
        db.query(Roster)
        .order_by(Roster.year.desc(), Roster.month.desc(), Roster.created_at.desc())
        .all()
    )
    return RosterListResponse(rosters=[_roster_to_record(r) for r in rosters]).model_dump()


@router.post("/rosters", status_code=201)
def create_roster(req: RosterCreateRequest, db: Session = Depends(get_db)) -> dict:
    roster = Roster(month=req.month, year=req.year, approved=False)
    db.add(roster)
    db.commit()
    db.refresh(roster)

    logger.info("Created roster %s (%02d/%d)", roster.id, roster.month, roster.year)
    return _roster_to_record(roster).model_dump()


@router.put("/rosters/{roster_id}/approve")
def approve_roster(roster_id: str, db: Session = Depends(get_db)) -> dict:
    roster = db.query(Roster).filter(Roster.id == roster_id).first()
    if not roster:
        raise HTTPException(status_code=404, detail="Roster not found")

    roster.approved = True
    db.commit()
    db.refresh(roster)

    logger.info("Roster %s approved", roster.id)
    return _roster_to_record(roster).model_dump()
