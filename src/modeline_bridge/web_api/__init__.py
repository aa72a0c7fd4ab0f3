"""
Modeline Bridge Web API
=======================
FastAPI-based REST API over the mode-line engine.

Quick Start:
    uvicorn modeline_bridge.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
