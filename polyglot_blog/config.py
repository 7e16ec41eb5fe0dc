from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from .config_schema import SiteConfig
from .errors import ConfigError
from .locales import default_site_data


def default_config() -> SiteConfig:
    """The built-in English/French/Hebrew site."""
    return SiteConfig.model_validate(default_site_data())


def load_config(path: str | Path | None = None) -> SiteConfig:
    """
    Load a YAML config file and validate it into a typed SiteConfig.

    Without a path the built-in site is returned. A file that omits
    ``languages`` inherits the built-in locales. Raises ConfigError with a
    readable validation message on failure.
    """
    if path is None:
        return default_config()

    p = Path(path)

    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")

    try:
        raw_text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {p}") from e

    try:
        data = yaml.safe_load(raw_text)
    except Exception as e:  # PyYAML can raise multiple exception types
        raise ConfigError(f"Failed to parse YAML in {p}: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Top-level YAML in {p} must be a mapping/object")

    if "languages" not in data:
        data = {**default_site_data(), **data}

    try:
        return SiteConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(_format_pydantic_errors(e, p)) from e


def _format_pydantic_errors(err: ValidationError, path: Path) -> str:
    lines: list[str] = [f"Invalid configuration in {path}:"]
    for item in err.errors():
        loc = ".".join(str(part) for part in item.get("loc", [])) or "<root>"
        msg = item.get("msg", "invalid value")
        lines.append(f"- {loc}: {msg}")
    return "\n".join(lines)
