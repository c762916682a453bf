"""
Quest Forge FastAPI Application

Main entry point for the Quest Forge API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Common library imports
from common.storage import KeyValueStore, MemoryKeyValueStore, JsonFileStore
from common.utils import APIException, success_response, error_response

# App-specific imports
from forge.config import settings

# Import routers
from forge.routers import (
    quests_router,
    progress_router,
    learning_router,
    tools_router,
    mentor_router,
    profile_router,
    functions_router,
)

# Import service initialization
from forge.dependencies import init_all_services

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


# =============================================================================
# Storage
# =============================================================================
store: KeyValueStore = MemoryKeyValueStore()


def create_store() -> KeyValueStore:
    """Build the configured key-value backend."""
    if settings.STORAGE_BACKEND == "file":
        return JsonFileStore(settings.STORAGE_PATH)

    return MemoryKeyValueStore()


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown tasks like storage setup
    and service initialization.
    """
    global store

    # Startup
    logger.info("Starting Quest Forge API...")

    try:
        settings.validate_required()
    except ValueError as e:
        # Missing AI keys only disable hosted generation
        logger.warning(str(e))

    store = create_store()
    logger.info(f"Using {settings.STORAGE_BACKEND} storage backend")

    init_all_services(store=store, settings=settings)
    logger.info("All services initialized successfully!")

    yield

    # Shutdown
    logger.info("Shutting down Quest Forge API...")


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="Quest Forge API",
    description="Gamified goal tracking with quests, levels, achievements and learning paths",
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# Error Envelope
# =============================================================================
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Render coded API errors in the standard error envelope."""
    if exc.status_code >= 500:
        logger.warning(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message, code=exc.code, details=exc.details),
        headers=exc.headers,
    )


# =============================================================================
# Include Routers (all under /api prefix)
# =============================================================================
API_PREFIX = "/api"

app.include_router(quests_router, prefix=API_PREFIX, tags=["Quests"])
app.include_router(progress_router, prefix=API_PREFIX, tags=["Progress"])
app.include_router(learning_router, prefix=API_PREFIX, tags=["Learning"])
app.include_router(tools_router, prefix=API_PREFIX, tags=["Tools"])
app.include_router(mentor_router, prefix=API_PREFIX, tags=["Mentor"])
app.include_router(profile_router, prefix=API_PREFIX, tags=["Profile"])
app.include_router(functions_router, prefix=API_PREFIX, tags=["Functions"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Returns the status of the API and its storage backend.
    """
    return success_response({
        "status": "ok",
        "version": VERSION,
        "storage": settings.STORAGE_BACKEND,
        "storageHealthy": await store.health_check(),
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
