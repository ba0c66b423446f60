"""Routers module - FastAPI route handlers"""

from . import profile, versions, compare, config

__all__ = ["profile", "versions", "compare", "config"]
