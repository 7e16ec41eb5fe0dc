from __future__ import annotations

from typing import Any

# Built-in site layout: three language pages sharing one set of posts.
DEFAULT_LANGUAGES: dict[str, dict[str, Any]] = {
    "en": {
        "date_grammar": "en",
        "rtl": False,
        "category_labels": {
            "real-estate": "Israel Real Estate",
            "economy": "The Shekel Exchange",
            "team": "The Team",
            "podcasts": "Podcasts",
        },
        "read_more": "Read More",
        "read_full": "Read Full Article",
        "listen_now": "Listen Now",
        "arrow": "→",
        "source_html": "blog.html",
        "output_page": "blog.html",
        "top_template": "templates/blog-en-top.html",
        "bottom_template": "templates/blog-en-bottom.html",
    },
    "fr": {
        "date_grammar": "fr",
        "rtl": False,
        "category_labels": {
            "real-estate": "Immobilier en Israël",
            "economy": "Le Change du Shekel",
            "team": "L'Équipe",
            "podcasts": "Podcasts",
        },
        "read_more": "Lire la Suite",
        "read_full": "Lire l'Article Complet",
        "listen_now": "Écouter",
        "arrow": "→",
        "source_html": "blog-fr.html",
        "output_page": "blog-fr.html",
        "top_template": "templates/blog-fr-top.html",
        "bottom_template": "templates/blog-fr-bottom.html",
    },
    "he": {
        "date_grammar": "he",
        "rtl": True,
        "category_labels": {
            "real-estate": 'נדל"ן בישראל',
            "economy": "שער השקל",
            "team": "הצוות",
            "podcasts": "פודקאסטים",
        },
        "read_more": "קראו עוד",
        "read_full": "קראו את המאמר המלא",
        "listen_now": "האזינו עכשיו",
        "arrow": "←",
        "source_html": "blog-he.html",
        "output_page": "blog-he.html",
        "top_template": "templates/blog-he-top.html",
        "bottom_template": "templates/blog-he-bottom.html",
    },
}


def default_site_data() -> dict[str, Any]:
    return {
        "content_dir": "content/blog",
        "canonical_language": "en",
        "languages": {code: dict(data) for code, data in DEFAULT_LANGUAGES.items()},
    }
