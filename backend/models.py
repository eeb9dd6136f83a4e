import uuid
from datetime import datetime

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Song(Base):
    __tablename__ = "songs"

    id = Column(String, primary_key=True, default=_new_id)
    title = Column(String, nullable=False)
    original_key = Column(String, nullable=True)
    link = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    chart = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class Member(Base):
    __tablename__ = "members"

    id = Column(String, primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    voice = Column(String, nullable=True)
    role = Column(String, nullable=True)
    birthday = Column(Date, nullable=True)


class WorshipService(Base):
    __tablename__ = "worship_services"

    id = Column(String, primary_key=True, default=_new_id)
    date = Column(Date, nullable=False)
    name = Column(String, nullable=False)
    share_slug = Column(String, nullable=False, unique=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    songs = relationship(
        "ServiceSong",
        order_by="ServiceSong.position",
        cascade="all, delete-orphan",
    )


class ServiceSong(Base):
    __tablename__ = "service_songs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    service_id = Column(String, ForeignKey("worship_services.id"), nullable=False)
    song_id = Column(String, ForeignKey("songs.id"), nullable=False)
    position = Column(Integer, nullable=False)

    song = relationship("Song")


class Roster(Base):
    __tablename__ = "rosters"

    id = Column(String, primary_key=True, default=_new_id)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    approved = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
