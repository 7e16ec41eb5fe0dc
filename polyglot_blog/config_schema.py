from __future__ import annotations

import re
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_HEX_COLOR_RE = re.compile(r"^[0-9A-Fa-f]{6}$")
_SIZE_RE = re.compile(r"^[1-9][0-9]*x[1-9][0-9]*$")
_LANG_CODE_RE = re.compile(r"^[a-z]{2,3}(-[A-Za-z0-9]+)*$")


def _validate_hex_color(value: str) -> str:
    color = (value or "").strip().lstrip("#")
    if not _HEX_COLOR_RE.fullmatch(color):
        raise ValueError("must be a 6-digit hex color")
    return color


def _validate_relative_path(value: str) -> str:
    path = (value or "").strip()
    if not path:
        raise ValueError("must be a non-empty path")
    return path


NonEmptyStr = Annotated[str, Field(min_length=1)]
Port = Annotated[int, Field(ge=0, le=65535)]


class LocaleConfig(BaseModel):
    """Typed locale descriptor governing one language's extraction and rendering."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    date_grammar: Literal["en", "fr", "he"]
    rtl: bool = False
    category_labels: dict[str, str] = Field(default_factory=dict)
    read_more: NonEmptyStr
    read_full: NonEmptyStr
    listen_now: NonEmptyStr
    arrow: str = "→"

    source_html: str
    output_page: str
    top_template: str
    bottom_template: str

    @field_validator("source_html", "output_page", "top_template", "bottom_template")
    @classmethod
    def _paths_must_be_set(cls, v: str) -> str:
        return _validate_relative_path(v)

    def category_label(self, category: str) -> str:
        return self.category_labels.get(category, category)


class PlaceholderConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = "https://placehold.co"
    card_colors: list[str] = Field(
        default_factory=lambda: ["0D2847", "1a3a5c", "1a4a6e", "1a3550", "1a2844", "1a3048"],
        min_length=1,
    )
    featured_color: str = "1a2e4a"
    card_size: str = "600x400"
    featured_size: str = "800x500"

    @field_validator("card_colors")
    @classmethod
    def _card_colors_must_be_hex(cls, v: list[str]) -> list[str]:
        return [_validate_hex_color(item) for item in v]

    @field_validator("featured_color")
    @classmethod
    def _featured_color_must_be_hex(cls, v: str) -> str:
        return _validate_hex_color(v)

    @field_validator("card_size", "featured_size")
    @classmethod
    def _size_must_be_wxh(cls, v: str) -> str:
        size = (v or "").strip()
        if not _SIZE_RE.fullmatch(size):
            raise ValueError("must look like <width>x<height>")
        return size

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        url = (v or "").strip().rstrip("/")
        if not url:
            raise ValueError("must be a non-empty URL")
        return url


class ServerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    host: str = "127.0.0.1"
    port: Port = 3000
    index_page: str = "index.html"


class ScreenshotConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    url: str = "http://localhost:3000"
    out_dir: str = "temporary screenshots"
    viewport_width: Annotated[int, Field(ge=1)] = 1440
    viewport_height: Annotated[int, Field(ge=1)] = 900
    navigation_timeout_ms: Annotated[int, Field(ge=0)] = 30000
    settle_ms: Annotated[int, Field(ge=0)] = 1500
    scroll_step_px: Annotated[int, Field(ge=1)] = 300
    scroll_pause_ms: Annotated[int, Field(ge=0)] = 200


class SiteConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    content_dir: str = "content/blog"
    canonical_language: str = "en"
    log_file: str = "polyglot_blog.log"
    languages: dict[str, LocaleConfig]
    placeholders: PlaceholderConfig = Field(default_factory=PlaceholderConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    screenshot: ScreenshotConfig = Field(default_factory=ScreenshotConfig)

    @field_validator("languages")
    @classmethod
    def _language_codes_must_be_valid(
        cls, v: dict[str, LocaleConfig]
    ) -> dict[str, LocaleConfig]:
        if not v:
            raise ValueError("must configure at least one language")
        for code in v:
            if not _LANG_CODE_RE.fullmatch(code):
                raise ValueError(f"invalid language code: {code!r}")
        return v

    @model_validator(mode="after")
    def _canonical_language_must_exist(self) -> "SiteConfig":
        if self.canonical_language not in self.languages:
            raise ValueError("canonical_language must be one of the configured languages")
        return self

    def locale(self, lang: str) -> LocaleConfig:
        try:
            return self.languages[lang]
        except KeyError:
            raise KeyError(f"Unknown language: {lang}") from None

    def ordered_languages(self) -> list[str]:
        """Canonical language first, then the rest in configured order."""
        rest = [code for code in self.languages if code != self.canonical_language]
        return [self.canonical_language, *rest]
