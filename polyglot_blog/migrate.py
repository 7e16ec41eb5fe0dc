from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from .config_schema import SiteConfig
from .dates import looks_like_iso_date
from .errors import ResourceMissingError
from .extract import ExtractedPage, extract_page
from .post import Post
from .run_log import RunLogger
from .store import PostStore

# Position 0 is the featured post (None when the canonical page had no
# featured block); positions 1.. are the grid cards in page order.
SlugTable = tuple[str | None, ...]


@dataclass(frozen=True)
class LanguageMigration:
    lang: str
    featured: int
    cards: int
    paths: Sequence[Path] = ()


@dataclass(frozen=True)
class MigrationResult:
    languages: Sequence[LanguageMigration] = field(default_factory=tuple)

    @property
    def documents(self) -> int:
        return sum(len(item.paths) for item in self.languages)


def canonical_slugs(page: ExtractedPage) -> SlugTable:
    featured = page.featured.slug if page.featured is not None else None
    return (featured, *(card.slug for card in page.cards))


def apply_canonical_slugs(page: ExtractedPage, table: SlugTable) -> list[Post]:
    """
    Give each post the canonical slug at its position.

    Cards past the end of the table keep their own extracted slug.
    """
    out: list[Post] = []

    if page.featured is not None:
        slug = table[0] if table else None
        out.append(page.featured.with_slug(slug) if slug else page.featured)

    for i, card in enumerate(page.cards):
        pos = i + 1
        slug = table[pos] if pos < len(table) else None
        out.append(card.with_slug(slug) if slug else card)

    return out


def unique_slug(slug: str, taken: set[str]) -> str:
    """Return ``slug``, or ``slug-2``, ``slug-3``... when it is already taken."""
    if slug not in taken:
        return slug
    n = 2
    while f"{slug}-{n}" in taken:
        n += 1
    return f"{slug}-{n}"


def read_source_html(path: Path) -> str:
    if not path.is_file():
        raise ResourceMissingError(f"Source HTML not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceMissingError(f"Failed to read source HTML: {path}: {e}") from e


def _check_alignment(
    lang: str, page: ExtractedPage, table: SlugTable, logger: RunLogger | None
) -> None:
    if logger is None:
        return
    has_featured = page.featured is not None
    canonical_featured = bool(table) and table[0] is not None
    if len(table) != len(page.cards) + 1 or has_featured != canonical_featured:
        logger.warning(
            "slug_table_misaligned",
            lang=lang,
            canonical_positions=len(table),
            featured=has_featured,
            cards=len(page.cards),
        )


def migrate_language(
    lang: str,
    page: ExtractedPage,
    table: SlugTable,
    store: PostStore,
    *,
    logger: RunLogger | None = None,
) -> LanguageMigration:
    _check_alignment(lang, page, table, logger)

    paths: list[Path] = []
    seen: set[str] = set()
    for post in apply_canonical_slugs(page, table):
        slug = unique_slug(post.slug, seen)
        if slug != post.slug:
            if logger is not None:
                logger.warning(
                    "slug_collision",
                    lang=lang,
                    slug=post.slug,
                    renamed=slug,
                    title=post.title,
                )
            post = post.with_slug(slug)
        seen.add(slug)

        if logger is not None and not looks_like_iso_date(post.date):
            logger.warning("date_unparsed", lang=lang, slug=post.slug, date=post.date)
        path = store.write(lang, post)
        paths.append(path)
        if logger is not None:
            logger.info(
                "document_written",
                lang=lang,
                slug=post.slug,
                featured=post.featured,
                path=str(path),
            )

    return LanguageMigration(
        lang=lang,
        featured=1 if page.featured is not None else 0,
        cards=len(page.cards),
        paths=tuple(paths),
    )


def run_migration(
    config: SiteConfig,
    root: str | Path,
    *,
    logger: RunLogger | None = None,
) -> MigrationResult:
    """
    Extract every configured language page into structured documents.

    The canonical language is extracted first; its slugs are then applied by
    position to every language before anything is written for it.
    """
    base = Path(root)
    store = PostStore(base / config.content_dir)

    table: SlugTable | None = None
    results: list[LanguageMigration] = []

    for lang in config.ordered_languages():
        locale = config.locale(lang)
        source = base / locale.source_html
        page = extract_page(read_source_html(source), locale)

        if logger is not None:
            logger.info(
                "page_extracted",
                lang=lang,
                source=str(source),
                featured=page.featured is not None,
                cards=len(page.cards),
            )
            if page.featured is None:
                logger.warning("featured_block_missing", lang=lang, source=str(source))

        if table is None:
            table = canonical_slugs(page)

        results.append(migrate_language(lang, page, table, store, logger=logger))

    return MigrationResult(languages=tuple(results))
