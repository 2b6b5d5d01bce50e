# reframe journal api
# fastapi app over the emotional processing core, async mongodb remote store and offline queue

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from reframe.config import settings
from reframe.dependencies import connectivity, offline_queue
from reframe.services.db import db
from reframe.services.pipeline import JournalPipeline
from reframe.services.store import RemoteStore
from reframe.routers import analyze, journals, streaks, sync

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """startup: connect to mongodb (or start offline). shutdown: close connection."""
    logger.info("Starting Reframe Journal backend...")
    try:
        await db.connect()
    except Exception as e:
        # keep serving: submissions go to the offline queue until /sync
        logger.warning(f"Remote store unavailable at startup, running offline: {e}")
        connectivity.set_online(False)
    else:
        if len(offline_queue) > 0:
            flushed = await JournalPipeline(RemoteStore(db), offline_queue, connectivity).flush_queue()
            logger.info(f"Flushed {flushed} queued entries at startup")
    logger.info("Reframe Journal backend ready")
    yield
    logger.info("Shutting down Reframe Journal backend...")
    await db.close()


app = FastAPI(
    title="Reframe Journal API",
    description="Emotional processing core: mood classification, reframe steps, coaching, distress checks and offline sync",
    version="0.1.0",
    lifespan=lifespan,
)

# cors: allow frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL, "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    """no raw error detail reaches the user: just a retry hint"""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Something went wrong. Please try again."},
    )


# register routers
app.include_router(journals.router)
app.include_router(sync.router)
app.include_router(analyze.router)
app.include_router(streaks.router)


@app.get("/health")
async def health_check():
    """basic health check endpoint"""
    return {"status": "ok", "service": "reframe-api", "online": connectivity.online}
