"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import health, resolve

__all__ = ["health", "resolve"]
