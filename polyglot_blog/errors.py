from __future__ import annotations


class ConfigError(RuntimeError):
    """Raised when configuration is missing or invalid."""


class ResourceMissingError(RuntimeError):
    """Raised when a source HTML page or a page template cannot be read."""


class StorageError(RuntimeError):
    """Raised when reading or writing structured post documents fails."""


class GenerationError(RuntimeError):
    """Raised when a language page cannot be assembled or written."""


class ScreenshotError(RuntimeError):
    """Raised when a headless browser capture fails."""
