import logging
import secrets

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from models import ServiceSong, Song, WorshipService
from schemas.worship import (
    ServiceCreateRequest,
    ServiceListResponse,
    ServiceRecord,
    ServiceSongEntry,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _generate_slug() -> str:
    return secrets.token_hex(6)


def _service_to_record(service: WorshipService) -> ServiceRecord:
    return ServiceRecord(
        id=service.id,
        date=service.date,
        name=service.name,
        share_slug=service.share_slug,
        share_url=f"{settings.share_path_prefix}/{service.share_slug}",
        songs=[
            ServiceSongEntry(
                position=entry.position,
                song_id=entry.song_id,
                title=entry.song.title,
                original_key=entry.song.original_key,
            )
            for entry in service.songs
        ],
    )


@router.get("/services")
def list_services(db: Session = Depends(get_db)) -> dict:
    services = (
        db.query(WorshipService)
        .order_by(WorshipService.date.desc(), WorshipService.created_at.desc())
        .all()
    )
    return ServiceListResponse(
        services=[_service_to_record(s) for s in services]
    ).model_dump()


@router.post("/services", status_code=201)
def create_service(req: ServiceCreateRequest, db: Session = Depends(get_db)) -> dict:
    found = {
        s.id for s in db.query(Song.id).filter(Song.id.in_(req.song_ids)).all()
    }
    missing = [song_id for song_id in req.song_ids if song_id not in found]
    if missing:
        raise HTTPException(status_code=400, detail=f"Unknown song_ids: {missing}")

    service = WorshipService(
        date=req.date,
        name=req.name,
        share_slug=_generate_slug(),
        songs=[
            ServiceSong(song_id=song_id, position=i)
            for i, song_id in enumerate(req.song_ids, start=1)
        ],
    )
    db.add(service)
    db.commit()
    db.refresh(service)

    logger.info(
        "Created service %s (%r on %s, %d songs)",
        service.id, service.name, service.date, len(req.song_ids),
    )
    return _service_to_record(service).model_dump()


@router.get("/services/share/{slug}")
def get_shared_service(slug: str, db: Session = Depends(get_db)) -> dict:
    service = db.query(WorshipService).filter(WorshipService.share_slug == slug).first()
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return _service_to_record(service).model_dump()
