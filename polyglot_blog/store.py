from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from .dates import coerce_date, looks_like_iso_date
from .errors import StorageError
from .post import Post

FRONT_MATTER_DELIMITER = "---"
DOCUMENT_SUFFIX = ".md"


def _quote(value: str) -> str:
    escaped = (
        str(value or "")
        .replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
    )
    return f'"{escaped}"'


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).strip()


def render_document(post: Post) -> str:
    """Serialize a post as front matter plus a body echoing the title."""
    date_value = post.date if looks_like_iso_date(post.date) else _quote(post.date)
    lines = [
        FRONT_MATTER_DELIMITER,
        f"title: {_quote(post.title)}",
        f"slug: {_quote(post.slug)}",
        f"date: {date_value}",
        f"category: {_quote(post.category)}",
        f"excerpt: {_quote(post.excerpt)}",
        f"image: {_quote(post.image)}",
        f"image_alt: {_quote(post.image_alt)}",
        f"featured: {'true' if post.featured else 'false'}",
        FRONT_MATTER_DELIMITER,
        "",
        post.title,
        "",
    ]
    return "\n".join(lines)


def split_front_matter(text: str) -> tuple[str, str] | None:
    """Return ``(header, body)`` or None when the text has no front matter block."""
    lines = (text or "").lstrip("\ufeff").splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return None
    for idx in range(1, len(lines)):
        if lines[idx].strip() == FRONT_MATTER_DELIMITER:
            return "".join(lines[1:idx]), "".join(lines[idx + 1 :])
    return None


def post_from_metadata(data: Mapping[str, Any], *, default_slug: str) -> Post:
    title = _coerce_text(data.get("title"))
    if not title:
        raise ValueError("title must be non-empty")

    raw_date = data.get("date")
    try:
        date_text = coerce_date(raw_date).isoformat()
    except ValueError as e:
        raise ValueError(f"invalid date {raw_date!r}") from e

    featured = data.get("featured")
    return Post(
        title=title,
        slug=_coerce_text(data.get("slug")) or default_slug,
        date=date_text,
        category=_coerce_text(data.get("category")),
        excerpt=_coerce_text(data.get("excerpt")),
        image=_coerce_text(data.get("image")),
        image_alt=_coerce_text(data.get("image_alt")),
        featured=featured is True,
    )


def parse_document(text: str, *, default_slug: str) -> Post:
    parts = split_front_matter(text)
    if parts is None:
        raise ValueError("missing front matter block")
    header, _ = parts

    try:
        data = yaml.safe_load(header)
    except yaml.YAMLError as e:
        raise ValueError(f"invalid front matter: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("front matter must be a mapping")

    return post_from_metadata(data, default_slug=default_slug)


class PostStore:
    """
    One structured document per post, partitioned by language.

    Layout: ``<root>/<lang>/<slug>.md``.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def partition(self, lang: str) -> Path:
        code = (lang or "").strip()
        if not code:
            raise ValueError("lang must be non-empty")
        return self._root / code

    def path_for(self, lang: str, slug: str) -> Path:
        return self.partition(lang) / f"{slug}{DOCUMENT_SUFFIX}"

    def write(self, lang: str, post: Post) -> Path:
        if not post.slug:
            raise StorageError(f"Refusing to write a post without a slug: {post.title!r}")

        path = self.path_for(lang, post.slug)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(render_document(post), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to write document: {path}: {e}") from e
        return path

    def read(self, path: str | Path) -> Post:
        p = Path(path)
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read document: {p}: {e}") from e

        try:
            return parse_document(text, default_slug=p.stem)
        except ValueError as e:
            raise StorageError(f"Invalid document {p}: {e}") from e

    def read_all(self, lang: str) -> list[Post]:
        folder = self.partition(lang)
        if not folder.is_dir():
            raise StorageError(f"Content partition not found: {folder}")

        paths = sorted(p for p in folder.glob(f"*{DOCUMENT_SUFFIX}") if p.is_file())
        return [self.read(p) for p in paths]
