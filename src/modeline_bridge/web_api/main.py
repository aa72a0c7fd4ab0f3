"""
FastAPI Application
==================
Main entry point for the mode-line resolution API.

Run with:
    uvicorn modeline_bridge.web_api.main:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from modeline_bridge import __version__
from modeline_bridge.web_api.config import settings
from modeline_bridge.web_api.routers import health, resolve

# Create application
app = FastAPI(
    title="Modeline Bridge API",
    description="Resolve Emacs mode lines into native editor settings",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(resolve.router, tags=["Resolve"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Modeline Bridge API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m modeline_bridge.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
