from __future__ import annotations

from pathlib import Path

_PAGE_HEAD = """\
<!DOCTYPE html>
<html lang="{lang}"{dir_attr}>
<head><meta charset="utf-8"><title>Blog</title></head>
<body>
<section class="blog">
  <div class="container">
"""

_PAGE_TAIL = """
    </div>
  </div>
</section>
<footer>footer</footer>
</body>
</html>
"""


def featured_block(cat: str, img: str, alt: str, date: str, title: str, excerpt: str) -> str:
    return f"""\
    <!-- Featured Post -->
    <div class="featured-post reveal" data-cat="{cat}">
      <div class="featured-img">
        <img src="{img}" alt="{alt}"/>
        <div class="featured-img-overlay"></div>
      </div>
      <div class="featured-body">
        <div class="featured-cat">label</div>
        <div class="featured-date">{date}</div>
        <h2 class="featured-title"><a href="#">{title}</a></h2>
        <p class="featured-excerpt">{excerpt}</p>
        <a href="#" class="featured-link">more &rarr;</a>
      </div>
    </div>
"""


def card_block(n: int, cat: str, img: str, alt: str, date: str, title: str, excerpt: str | None) -> str:
    excerpt_line = (
        f'          <p class="blog-card-excerpt">{excerpt}</p>\n' if excerpt is not None else ""
    )
    return f"""\
      <!-- Post {n} -->
      <div class="blog-card reveal rd{n}" data-cat="{cat}">
        <div class="blog-card-img">
          <img src="{img}" alt="{alt}"/>
          <div class="blog-card-img-overlay"></div>
          <span class="blog-card-cat">label</span>
        </div>
        <div class="blog-card-body">
          <div class="blog-card-date">{date}</div>
          <h3 class="blog-card-title"><a href="#">{title}</a></h3>
{excerpt_line}          <a href="#" class="blog-card-link">more &rarr;</a>
        </div>
      </div>
"""


def legacy_page(lang: str, featured: str, cards: list[str], *, rtl: bool = False) -> str:
    head = _PAGE_HEAD.format(lang=lang, dir_attr=' dir="rtl"' if rtl else "")
    grid = (
        "\n    <!-- Blog Grid -->\n"
        '    <div class="blog-grid">\n\n'
        + "\n".join(cards)
    )
    return head + featured + grid + _PAGE_TAIL


EN_PAGE = legacy_page(
    "en",
    featured_block(
        "real-estate",
        "img/market.jpg",
        "Tel Aviv skyline",
        "January 23, 2025",
        "Tel Aviv&#39;s Market &mdash; Up 12%",
        "Prices rose &amp; rents followed.",
    ),
    [
        card_block(1, "economy", "img/shekel.jpg", "Shekel coins", "March 1, 2025",
              "Shekel &amp; Dollar", "The shekel gained."),
        card_block(2, "podcasts", "", "Podcast episode 4", "February 10, 2025",
              "Episode 4: Mortgages", None),
    ],
)

FR_PAGE = legacy_page(
    "fr",
    featured_block(
        "real-estate",
        "img/market.jpg",
        "Tel Aviv skyline",
        "23 janvier 2025",
        "Le march&eacute; de Tel Aviv",
        "Les prix ont augment&eacute;.",
    ),
    [
        card_block(1, "economy", "img/shekel.jpg", "Shekel coins", "1 mars 2025",
              "Le shekel et le dollar", "Le shekel a progress&eacute;."),
        card_block(2, "podcasts", "", "Podcast episode 4", "10 f&eacute;vrier 2025",
              "&Eacute;pisode 4&nbsp;: les pr&ecirc;ts", "Un podcast."),
    ],
)

HE_PAGE = legacy_page(
    "he",
    featured_block(
        "real-estate",
        "img/market.jpg",
        "Tel Aviv skyline",
        "23 &#1497;&#1504;&#1493;&#1488;&#1512; 2025",
        "השוק בתל אביב",
        "המחירים עלו.",
    ),
    [
        card_block(1, "economy", "img/shekel.jpg", "Shekel coins", "1 מרץ 2025",
              "השקל והדולר", "השקל התחזק."),
        card_block(2, "podcasts", "", "Podcast episode 4", "10 פברואר 2025",
              "פרק 4", "פודקאסט."),
    ],
    rtl=True,
)

EN_SLUGS = ("tel-avivs-market-up-12", "shekel-dollar", "episode-4-mortgages")

TEMPLATE_TOP = '<html><body>\n<section class="blog">\n  <div class="container">\n'
TEMPLATE_BOTTOM = "<footer>bottom</footer>\n</body></html>\n"


def write_legacy_site(root: Path) -> None:
    root.mkdir(parents=True, exist_ok=True)
    (root / "blog.html").write_text(EN_PAGE, encoding="utf-8")
    (root / "blog-fr.html").write_text(FR_PAGE, encoding="utf-8")
    (root / "blog-he.html").write_text(HE_PAGE, encoding="utf-8")


def write_templates(root: Path, langs: tuple[str, ...] = ("en", "fr", "he")) -> None:
    folder = root / "templates"
    folder.mkdir(parents=True, exist_ok=True)
    for lang in langs:
        (folder / f"blog-{lang}-top.html").write_text(
            TEMPLATE_TOP.replace("<html>", f'<html lang="{lang}">'), encoding="utf-8"
        )
        (folder / f"blog-{lang}-bottom.html").write_text(TEMPLATE_BOTTOM, encoding="utf-8")
