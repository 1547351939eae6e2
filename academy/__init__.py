# ============================================================================
# FILE: academy/__init__.py
# ============================================================================
"""Language Academy API - Application Factory"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
from motor.motor_asyncio import AsyncIOMotorClient
import logging

from academy.core.config import settings
from academy.core import globals as app_globals
from academy.api.routes import router as api_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown"""
    # Startup
    try:
        logger.info("Starting application...")
        app_globals.client = AsyncIOMotorClient(settings.MONGO_URI)
        await app_globals.client.admin.command("ping")
        logger.info("✓ Database client initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database client: {e}")
        raise

    yield

    # Shutdown
    if app_globals.client:
        app_globals.client.close()
        app_globals.client = None
        logger.info("✓ Database client closed")

def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title=settings.API_TITLE,
        description="Course marketplace backend for the Language Academy",
        version=settings.API_VERSION,
        lifespan=lifespan
    )

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.get("/", response_class=PlainTextResponse)
    async def index():
        return "The Language Academy Server is running..."

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        from datetime import datetime, timezone
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": settings.API_VERSION
        }

    logger.info("FastAPI application created")
    return app

# Create app instance
app = create_app()
