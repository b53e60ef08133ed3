"""
FastAPI application entry point.
"""

from fastapi import FastAPI

from padcheck import __version__
from padcheck.config import settings
from padcheck.api import lint
from padcheck.utils.logging import setup_logging, get_logger

# Configure structured logging
setup_logging(settings.log_level)

logger = get_logger(__name__)

# Create FastAPI application
app = FastAPI(
    title="padcheck",
    description="Blank-line padding checks for code blocks",
    version=__version__
)


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "healthy", "version": __version__}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "padcheck API",
        "version": __version__,
        "docs": "/docs"
    }


# Include API routers
app.include_router(lint.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
