from __future__ import annotations

from typing import Sequence

from .config_schema import LocaleConfig, PlaceholderConfig
from .dates import coerce_date
from .errors import GenerationError
from .post import Post
from .render import render_card, render_featured

GRID_OPEN = """
    <!-- Blog Grid -->
    <div class="blog-grid">

"""

GRID_CLOSE = """

    </div>
  </div>
</section>

"""


def sort_posts(posts: Sequence[Post]) -> list[Post]:
    """Newest first; posts sharing a date keep their incoming order."""
    return sorted(posts, key=lambda p: coerce_date(p.date), reverse=True)


def select_featured(sorted_posts: Sequence[Post]) -> tuple[Post, list[Post]]:
    if not sorted_posts:
        raise GenerationError("No posts available to feature")

    idx = next((i for i, p in enumerate(sorted_posts) if p.featured), 0)
    featured = sorted_posts[idx]
    cards = [p for i, p in enumerate(sorted_posts) if i != idx]
    return featured, cards


def render_grid(
    cards: Sequence[Post],
    locale: LocaleConfig,
    placeholders: PlaceholderConfig,
) -> str:
    fragments = [
        f"      <!-- Post {i + 1} -->\n" + render_card(post, i, locale, placeholders)
        for i, post in enumerate(cards)
    ]
    return GRID_OPEN + "\n\n".join(fragments) + GRID_CLOSE


def render_page(
    featured: Post,
    cards: Sequence[Post],
    locale: LocaleConfig,
    top: str,
    bottom: str,
    placeholders: PlaceholderConfig | None = None,
) -> str:
    """
    Stitch one language page together from an already selected featured post.

    The templates are opaque; nothing here looks inside them.
    """
    ph = placeholders or PlaceholderConfig()
    featured_html = render_featured(featured, locale, ph)
    return top + featured_html + "\n" + render_grid(cards, locale, ph) + bottom


def assemble_page(
    posts: Sequence[Post],
    locale: LocaleConfig,
    top: str,
    bottom: str,
    placeholders: PlaceholderConfig | None = None,
) -> str:
    featured, cards = select_featured(sort_posts(posts))
    return render_page(featured, cards, locale, top, bottom, placeholders)
