"""
API package for the Energy Price API.
Contains FastAPI route handlers, dependency providers and error handling.
"""

from .routes import router

__all__ = [
    "router",
]
