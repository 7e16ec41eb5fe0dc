from __future__ import annotations

import re
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Sequence

from .config_schema import LocaleConfig
from .dates import parse_date
from .entities import decode_entities
from .post import Post
from .slugs import slugify

_FEATURED_RE = re.compile(
    r'<div class="featured-post reveal"[\s\S]*?</div>\s*</div>\s*\n\s*\n\s*<!-- Blog Grid -->'
)
_GRID_RE = re.compile(
    r'<!-- Blog Grid -->\s*<div class="blog-grid">([\s\S]*?)</div>\s*</div>\s*</section>'
)
_POST_MARKER_RE = re.compile(r"<!-- Post \d+ -->")


@dataclass(frozen=True)
class FieldSelector:
    tag: str
    css_class: str


@dataclass(frozen=True)
class RoleSelectors:
    date: FieldSelector
    title: FieldSelector
    excerpt: FieldSelector

    def items(self) -> tuple[tuple[str, FieldSelector], ...]:
        return (("date", self.date), ("title", self.title), ("excerpt", self.excerpt))


FEATURED_SELECTORS = RoleSelectors(
    date=FieldSelector("div", "featured-date"),
    title=FieldSelector("h2", "featured-title"),
    excerpt=FieldSelector("p", "featured-excerpt"),
)
CARD_SELECTORS = RoleSelectors(
    date=FieldSelector("div", "blog-card-date"),
    title=FieldSelector("h3", "blog-card-title"),
    excerpt=FieldSelector("p", "blog-card-excerpt"),
)


@dataclass(frozen=True)
class FragmentFields:
    """Raw per-field scan result. Every field missing from the markup is ``""``."""

    category: str = ""
    image: str = ""
    image_alt: str = ""
    date: str = ""
    title: str = ""
    excerpt: str = ""


@dataclass(frozen=True)
class ExtractedPage:
    featured: Post | None
    cards: Sequence[Post] = ()

    @property
    def posts(self) -> list[Post]:
        head = [self.featured] if self.featured is not None else []
        return [*head, *self.cards]


class _FragmentScanner(HTMLParser):
    """
    Tolerant scanner over tag/attribute tokens of one post fragment.

    Only the first occurrence of each field counts. Character references in
    text are kept raw so they can go through decode_entities afterwards;
    attribute values arrive already unescaped by HTMLParser.
    """

    def __init__(self, selectors: RoleSelectors) -> None:
        super().__init__(convert_charrefs=False)
        self._selectors = selectors
        self.values: dict[str, str] = {}
        self._capture: str | None = None
        self._capture_tag = ""
        self._depth = 0
        self._buf: list[str] = []

    def _note_attrs(self, tag: str, attrs_dict: dict[str, str]) -> None:
        if "category" not in self.values and "data-cat" in attrs_dict:
            self.values["category"] = attrs_dict["data-cat"]

        if tag == "img" and "image" not in self.values:
            self.values["image"] = attrs_dict.get("src", "")
            self.values["image_alt"] = attrs_dict.get("alt", "")

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        attrs_dict = {k: (v or "") for k, v in attrs}
        self._note_attrs(tag, attrs_dict)

        if self._capture is not None:
            if tag == self._capture_tag:
                self._depth += 1
            return

        classes = attrs_dict.get("class", "").split()
        for name, sel in self._selectors.items():
            if name in self.values:
                continue
            if tag == sel.tag and sel.css_class in classes:
                self._capture = name
                self._capture_tag = tag
                self._depth = 1
                self._buf = []
                return

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        # Self-closing tags never open a capture.
        self._note_attrs(tag, {k: (v or "") for k, v in attrs})

    def handle_endtag(self, tag: str) -> None:
        if self._capture is None or tag != self._capture_tag:
            return
        self._depth -= 1
        if self._depth <= 0:
            self.values[self._capture] = "".join(self._buf)
            self._capture = None
            self._buf = []

    def handle_data(self, data: str) -> None:
        if self._capture is not None:
            self._buf.append(data)

    def handle_entityref(self, name: str) -> None:
        self.handle_data(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self.handle_data(f"&#{name};")

    def close(self) -> None:
        super().close()
        # An unterminated element still yields what was collected so far.
        if self._capture is not None:
            self.values.setdefault(self._capture, "".join(self._buf))
            self._capture = None


def scan_fragment(block: str, selectors: RoleSelectors) -> FragmentFields:
    scanner = _FragmentScanner(selectors)
    scanner.feed(block or "")
    scanner.close()
    v = scanner.values
    return FragmentFields(
        category=v.get("category", ""),
        image=v.get("image", ""),
        image_alt=v.get("image_alt", ""),
        date=v.get("date", ""),
        title=v.get("title", ""),
        excerpt=v.get("excerpt", ""),
    )


def parse_post(block: str, locale: LocaleConfig, *, featured: bool) -> Post:
    selectors = FEATURED_SELECTORS if featured else CARD_SELECTORS
    fields = scan_fragment(block, selectors)

    title = decode_entities(fields.title.strip())
    image_alt = fields.image_alt
    date = parse_date(locale.date_grammar, fields.date.strip())

    # Non-English titles do not slugify well; the alt text is English-ish.
    if locale.date_grammar == "en":
        slug_source = title
    else:
        slug_source = image_alt or title

    return Post(
        title=title,
        slug=slugify(slug_source),
        date=date,
        category=fields.category,
        excerpt=decode_entities(fields.excerpt.strip()),
        image=fields.image,
        image_alt=image_alt,
        featured=featured,
    )


def extract_featured(html: str, locale: LocaleConfig) -> Post | None:
    m = _FEATURED_RE.search(html or "")
    if not m:
        return None
    return parse_post(m.group(0), locale, featured=True)


def extract_cards(html: str, locale: LocaleConfig) -> list[Post]:
    m = _GRID_RE.search(html or "")
    if not m:
        return []

    blocks = [b for b in _POST_MARKER_RE.split(m.group(1)) if "blog-card" in b]
    return [parse_post(b, locale, featured=False) for b in blocks]


def extract_page(html: str, locale: LocaleConfig) -> ExtractedPage:
    return ExtractedPage(
        featured=extract_featured(html, locale),
        cards=tuple(extract_cards(html, locale)),
    )
