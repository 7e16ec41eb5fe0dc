from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from .assemble import render_page, select_featured, sort_posts
from .config_schema import SiteConfig
from .errors import GenerationError, ResourceMissingError
from .run_log import RunLogger
from .store import PostStore


@dataclass(frozen=True)
class PageBuild:
    lang: str
    output: Path
    featured_slug: str
    cards: int


@dataclass(frozen=True)
class BuildResult:
    pages: Sequence[PageBuild] = field(default_factory=tuple)


def read_template(path: Path) -> str:
    if not path.is_file():
        raise ResourceMissingError(f"Template not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceMissingError(f"Failed to read template: {path}: {e}") from e


def build_language(
    config: SiteConfig,
    root: str | Path,
    lang: str,
    *,
    logger: RunLogger | None = None,
) -> PageBuild:
    base = Path(root)
    locale = config.locale(lang)
    store = PostStore(base / config.content_dir)

    posts = store.read_all(lang)
    if logger is not None:
        logger.info("documents_loaded", lang=lang, count=len(posts))

    top = read_template(base / locale.top_template)
    bottom = read_template(base / locale.bottom_template)

    featured, cards = select_featured(sort_posts(posts))
    page = render_page(featured, cards, locale, top, bottom, config.placeholders)

    output = base / locale.output_page
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(page, encoding="utf-8")
    except OSError as e:
        raise GenerationError(f"Failed to write page: {output}: {e}") from e

    if logger is not None:
        logger.info(
            "page_built",
            lang=lang,
            output=str(output),
            featured=featured.slug,
            cards=len(cards),
        )

    return PageBuild(lang=lang, output=output, featured_slug=featured.slug, cards=len(cards))


def run_build(
    config: SiteConfig,
    root: str | Path,
    *,
    languages: Sequence[str] | None = None,
    logger: RunLogger | None = None,
) -> BuildResult:
    """Build each language page in turn; the first failure stops the run."""
    selected = list(languages) if languages else list(config.languages)
    pages = [build_language(config, root, lang, logger=logger) for lang in selected]
    return BuildResult(pages=tuple(pages))
