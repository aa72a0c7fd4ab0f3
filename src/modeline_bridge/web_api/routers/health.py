"""
Health Check Router
==================
Endpoints for health checks and readiness probes.
"""
from fastapi import APIRouter

from modeline_bridge import __version__
from modeline_bridge.directives import SUPPORTED_DIRECTIVES

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """
    Readiness check endpoint.
    Lists the directives the engine will apply.
    """
    return {"status": "ready", "directives": SUPPORTED_DIRECTIVES}
