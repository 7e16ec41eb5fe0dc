from __future__ import annotations

from .config_schema import LocaleConfig, PlaceholderConfig
from .dates import format_date
from .entities import escape_minimal as esc
from .post import Post

PODCAST_CATEGORY = "podcasts"
REVEAL_CLASS_COUNT = 6

_DEFAULT_PLACEHOLDERS = PlaceholderConfig()


def reveal_class(index: int) -> str:
    return f"rd{(index % REVEAL_CLASS_COUNT) + 1}"


def placeholder_image(
    placeholders: PlaceholderConfig, *, index: int | None = None
) -> str:
    """
    Deterministic stand-in image URL.

    ``index=None`` selects the reserved featured color; card indexes cycle
    through the card palette.
    """
    if index is None:
        color = placeholders.featured_color
        size = placeholders.featured_size
    else:
        colors = placeholders.card_colors
        color = colors[index % len(colors)]
        size = placeholders.card_size
    return f"{placeholders.base_url}/{size}/{color}/{color}"


def _link_text(post: Post, locale: LocaleConfig, *, default: str) -> str:
    label = locale.listen_now if post.category == PODCAST_CATEGORY else default
    if locale.rtl:
        return f"{esc(locale.arrow)} {esc(label)}"
    return f"{esc(label)} {esc(locale.arrow)}"


def _order_blocks(image_block: str, body_block: str, locale: LocaleConfig) -> str:
    if locale.rtl:
        return body_block + "\n" + image_block
    return image_block + "\n" + body_block


def render_featured(
    post: Post,
    locale: LocaleConfig,
    placeholders: PlaceholderConfig = _DEFAULT_PLACEHOLDERS,
) -> str:
    image = post.image or placeholder_image(placeholders)
    alt = post.image_alt or post.title
    date = format_date(post.date, locale.date_grammar)

    image_block = (
        '      <div class="featured-img">\n'
        f'        <img src="{esc(image)}" alt="{esc(alt)}"/>\n'
        '        <div class="featured-img-overlay"></div>\n'
        "      </div>"
    )
    body_block = (
        '      <div class="featured-body">\n'
        f'        <div class="featured-cat">{esc(locale.category_label(post.category))}</div>\n'
        f'        <div class="featured-date">{esc(date)}</div>\n'
        f'        <h2 class="featured-title"><a href="#">{esc(post.title)}</a></h2>\n'
        f'        <p class="featured-excerpt">{esc(post.excerpt)}</p>\n'
        f'        <a href="#" class="featured-link">{_link_text(post, locale, default=locale.read_full)}</a>\n'
        "      </div>"
    )

    return (
        "    <!-- Featured Post -->\n"
        f'    <div class="featured-post reveal" data-cat="{esc(post.category)}">\n'
        f"{_order_blocks(image_block, body_block, locale)}\n"
        "    </div>"
    )


def render_card(
    post: Post,
    index: int,
    locale: LocaleConfig,
    placeholders: PlaceholderConfig = _DEFAULT_PLACEHOLDERS,
) -> str:
    image = post.image or placeholder_image(placeholders, index=index)
    alt = post.image_alt or post.title
    date = format_date(post.date, locale.date_grammar)

    image_block = (
        '        <div class="blog-card-img">\n'
        f'          <img src="{esc(image)}" alt="{esc(alt)}"/>\n'
        '          <div class="blog-card-img-overlay"></div>\n'
        '          <div class="blog-card-img-color"></div>\n'
        f'          <span class="blog-card-cat">{esc(locale.category_label(post.category))}</span>\n'
        "        </div>"
    )
    body_block = (
        '        <div class="blog-card-body">\n'
        f'          <div class="blog-card-date">{esc(date)}</div>\n'
        f'          <h3 class="blog-card-title"><a href="#">{esc(post.title)}</a></h3>\n'
        f'          <p class="blog-card-excerpt">{esc(post.excerpt)}</p>\n'
        f'          <a href="#" class="blog-card-link">{_link_text(post, locale, default=locale.read_more)}</a>\n'
        "        </div>"
    )

    return (
        f'      <div class="blog-card reveal {reveal_class(index)}" data-cat="{esc(post.category)}">\n'
        f"{_order_blocks(image_block, body_block, locale)}\n"
        "      </div>"
    )
