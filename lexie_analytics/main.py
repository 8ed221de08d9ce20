from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.concurrency import run_in_threadpool

from lexie_analytics.api import collect as collect_api
from lexie_analytics.api import reports as reports_api
from lexie_analytics.core.config import settings
from lexie_analytics.core.database import db_manager
from lexie_analytics.core.logging import setup_logging
from lexie_analytics.core.middleware import setup_error_handlers
from lexie_analytics.repositories.indexes import ensure_indexes

# Setup logging
logger = setup_logging(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)


def create_indexes():
    try:
        ensure_indexes(db_manager.db)
    except Exception as e:
        logger.error(f"Failed to create indexes: {str(e)}")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Create indexes on startup, close the Mongo client on shutdown
    """
    await run_in_threadpool(create_indexes)
    yield
    db_manager.close()


# Initialize FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Enable GZip compression for responses
app.add_middleware(GZipMiddleware, minimum_size=1024)

# Setup error handlers
setup_error_handlers(app)


@app.get("/api/health")
def health():
    return {
        "status": "ok",
        "version": settings.VERSION,
    }


# Mount routes
app.include_router(collect_api.router)
app.include_router(reports_api.router)
