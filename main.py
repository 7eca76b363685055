from fastapi import FastAPI
from app.api.v1.endpoints import resumes
from app.core.config import settings
from app.db.database import init_db, close_db
from contextlib import asynccontextmanager
import logging

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield
    close_db()

app = FastAPI(title=settings.APP_NAME, version="0.1.0", lifespan=lifespan)
app.include_router(resumes.router, prefix="/api/v1/resumes", tags=["resumes"])

@app.get("/health", tags=["health"])
async def health():
    """Health check endpoint returning service status."""
    return {"status": "ok"}
