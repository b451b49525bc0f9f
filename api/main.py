import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from artist_events import router as artist_events_router
from artists import router as artists_router
from core import db, mailer
from core.errors import register_error_handlers
from events import router as events_router
from mail import router as mail_router
from tickets import router as tickets_router

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def _configure_logging() -> None:
    level = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(_: FastAPI):
    _configure_logging()
    # One DB pool per process, shared by every resource.
    await db.init_pool()
    try:
        await mailer.verify()
        logger.info("api_started")
        yield
    finally:
        await db.close_pool()
        logger.info("api_stopped")


app = FastAPI(title="API de Gestão de Eventos", lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(artists_router.router, tags=["artistas"])
app.include_router(events_router.router, tags=["eventos"])
app.include_router(artist_events_router.router, tags=["artistas-eventos"])
app.include_router(tickets_router.router, tags=["ingressos"])
app.include_router(mail_router.router, tags=["mail"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "API de Gestão de Eventos"}
