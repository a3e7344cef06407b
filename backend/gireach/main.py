"""FastAPI entry point: middleware, error handlers, API routers and uploaded-file serving."""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from gireach.config import settings
from gireach.errors import register_error_handlers
from gireach.routers import auth, content, feedback, media, projects, settings as settings_router, webinars
from gireach.storage import get_storage

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="GI REACH",
    description="Academic mentorship site: editable page content, settings, webinars and research projects",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(auth.router)
app.include_router(content.router)
app.include_router(settings_router.router)
app.include_router(media.router)
app.include_router(feedback.router)
app.include_router(webinars.router)
app.include_router(projects.router)


@app.on_event("startup")
def ensure_schema():
    storage = get_storage()
    if storage.uses_database:
        # Create missing tables for newly added features.
        storage.delegate.create_tables()
    else:
        storage.delegate.init()


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "GI REACH"}


os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")
