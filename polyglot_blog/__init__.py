from __future__ import annotations

from .config import default_config, load_config
from .config_schema import LocaleConfig, SiteConfig
from .errors import (
    ConfigError,
    GenerationError,
    ResourceMissingError,
    ScreenshotError,
    StorageError,
)
from .post import Post

__all__ = [
    "ConfigError",
    "GenerationError",
    "LocaleConfig",
    "Post",
    "ResourceMissingError",
    "ScreenshotError",
    "SiteConfig",
    "StorageError",
    "default_config",
    "load_config",
]
