"""
Storage package for the Energy Price API.
Contains the file-backed JSON cache.
"""

from .cache import CacheService

__all__ = [
    "CacheService",
]
