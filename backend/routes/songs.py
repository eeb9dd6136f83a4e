import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from database import get_db
from models import Song
from schemas.song import ChartUpdateRequest, SongCreateRequest, SongListResponse, SongRecord
from schemas.transpose import SongChartResponse
from services.theory import (
    current_key,
    infer_key,
    parse_key,
    semitone_interval,
    transpose_chart,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _song_to_record(song: Song) -> SongRecord:
    return SongRecord(
        id=song.id,
        title=song.title,
        original_key=song.original_key,
        link=song.link,
        notes=song.notes,
        chart=song.chart,
        created_at=song.created_at.isoformat() if song.created_at else None,
    )


def _load_song(song_id: str, db: Session) -> Song:
    song = db.query(Song).filter(Song.id == song_id).first()
    if not song:
        raise HTTPException(status_code=404, detail="Song not found")
    return song


def _resolve_semitones(
    song: Song, semitones: Optional[int], target_key: Optional[str]
) -> int:
    """Offset to render at: explicit semitones, or the interval to target_key."""
    if target_key is None:
        return semitones or 0
    if semitones is not None:
        raise HTTPException(
            status_code=400,
            detail="Pass either semitones or target_key, not both",
        )

    try:
        parse_key(target_key)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid target_key: {target_key!r}")

    # Determine source key
    source_key = song.original_key or infer_key(song.chart)
    if source_key is None:
        raise HTTPException(
            status_code=400,
            detail="Song has no original_key and no chords to infer it from",
        )

    try:
        return semitone_interval(source_key, target_key)
    except ValueError as exc:
        logger.error("Song %s: stored key does not parse: %s", song.id, exc)
        raise HTTPException(status_code=500, detail="Invalid original_key stored for song")


@router.get("/songs")
def list_songs(db: Session = Depends(get_db)) -> dict:
    songs = db.query(Song).order_by(Song.title).all()
    return SongListResponse(songs=[_song_to_record(s) for s in songs]).model_dump()


@router.post("/songs", status_code=201)
def create_song(req: SongCreateRequest, db: Session = Depends(get_db)) -> dict:
    song = Song(
        title=req.title,
        original_key=req.original_key,
        link=req.link,
        notes=req.notes,
        chart=req.chart,
    )
    db.add(song)
    db.commit()
    db.refresh(song)

    logger.info("Created song %s (%r, key=%s)", song.id, song.title, song.original_key)
    return _song_to_record(song).model_dump()


@router.get("/songs/{song_id}")
def get_song(song_id: str, db: Session = Depends(get_db)) -> dict:
    return _song_to_record(_load_song(song_id, db)).model_dump()


@router.put("/songs/{song_id}/chart")
def update_chart(
    song_id: str,
    req: ChartUpdateRequest,
    db: Session = Depends(get_db),
) -> dict:
    song = _load_song(song_id, db)
    song.chart = req.chart
    db.commit()
    db.refresh(song)

    logger.info("Song %s: chart updated (%d lines)", song.id, len(req.chart.split("\n")))
    return _song_to_record(song).model_dump()


@router.get("/songs/{song_id}/chart")
def get_song_chart(
    song_id: str,
    semitones: Optional[int] = None,
    target_key: Optional[str] = None,
    db: Session = Depends(get_db),
) -> dict:
    song = _load_song(song_id, db)
    offset = _resolve_semitones(song, semitones, target_key)

    # Always recomputed from the stored original, never from a prior render
    response = SongChartResponse(
        song_id=song.id,
        title=song.title,
        original_key=song.original_key,
        current_key=current_key(song.original_key, offset),
        semitones=offset,
        chart=transpose_chart(song.chart, offset),
    )
    return response.model_dump()
