"""
Domain exceptions for the Energy Price API.
Provides clear, typed exceptions for business logic errors.
"""


class PriceAPIException(Exception):
    """Base exception for all Energy Price API errors."""
    pass


class InvalidArgumentError(PriceAPIException, ValueError):
    """Raised when an energy type or date query parameter is invalid."""
    pass


class EmptyDatasetError(PriceAPIException):
    """Raised when no usable price records are available for the requested date."""
    pass


class FetchError(PriceAPIException):
    """Raised when the upstream provider is unreachable or keeps failing."""
    pass


class ConfigurationError(PriceAPIException):
    """Raised when required upstream configuration (secret, base URL) is missing."""
    pass


class CacheCorruptionError(PriceAPIException):
    """Raised when a cache file exists but cannot be parsed."""
    pass


class CacheWriteError(PriceAPIException, OSError):
    """Raised when a cache file cannot be written."""
    pass
