import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from database import engine, Base
from routes.health import router as health_router
from routes.members import router as members_router
from routes.rosters import router as rosters_router
from routes.songs import router as songs_router
from routes.transpose import router as transpose_router
from routes.worship import router as worship_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Harmonia API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup() -> None:
    Base.metadata.create_all(bind=engine)


app.include_router(health_router)
app.include_router(songs_router)
app.include_router(transpose_router)
app.include_router(members_router)
app.include_router(worship_router)
app.include_router(rosters_router)
