"""
SOFI Dashboard API — FastAPI Main Application
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core.config import settings
from app.models import database as db

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed demo data on startup."""
    logger.info("%s v%s starting...", settings.app_name, settings.version)
    db.init_db()
    if settings.seed_demo_data:
        from app.demo.seed_data import seed_demo_data
        seed_demo_data()
    stats = db.get_stats()
    logger.info("Database ready: %d users, %d funds, %d portfolios", stats["users"], stats["funds"], stats["portfolios"])
    yield
    logger.info("Shutting down...")
    db.close()


app = FastAPI(
    title=settings.app_name,
    description="Pension & insurance fund dashboard: funds, risk, recommendations and reports",
    version=settings.version,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": settings.version}


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs",
        "health": "/health",
    }


def run():
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
