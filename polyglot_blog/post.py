from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Post:
    """One blog entry in one language."""

    title: str
    slug: str
    date: str
    category: str = ""
    excerpt: str = ""
    image: str = ""
    image_alt: str = ""
    featured: bool = False

    def with_slug(self, slug: str) -> "Post":
        return replace(self, slug=slug)
