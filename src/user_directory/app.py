"""Main FastAPI application module.

This module initializes the FastAPI application and registers all route handlers.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_directory.api.routes import auth, profile
from user_directory.config import (
    API_HOST,
    API_PORT,
    API_TITLE,
    API_VERSION,
    CORS_ALLOWED_ORIGINS,
)
from user_directory.core.database import init_db
from user_directory.core.logging_config import setup_logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI application
app = FastAPI(
    title=API_TITLE,
    description="Login, registration and profile endpoints over a user table.",
    version=API_VERSION,
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register route handlers
app.include_router(auth.router)
app.include_router(profile.router)


@app.on_event("startup")
def startup_tasks() -> None:
    """Create the database tables if they do not exist yet."""
    init_db()


@app.get("/", summary="API root", tags=["Info"])
def root() -> dict:
    """API root, returns API information and documentation links.

    Returns:
        Dictionary with API information and documentation links.
    """
    return {
        "name": API_TITLE,
        "version": API_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc",
        },
        "health": "/health",
    }


@app.get("/health", summary="Health check", tags=["Health"])
def health() -> dict:
    """Health check endpoint.

    Returns:
        Dictionary with status "ok".
    """
    return {"status": "ok"}


# --- Startup code for direct execution ---
if __name__ == "__main__":
    import uvicorn

    logger.info("Starting %s on http://%s:%s", API_TITLE, API_HOST, API_PORT)
    logger.info("API docs: http://%s:%s/docs", API_HOST, API_PORT)
    uvicorn.run("user_directory.app:app", host=API_HOST, port=API_PORT)
