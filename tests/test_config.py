from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from polyglot_blog.config import default_config, load_config
from polyglot_blog.errors import ConfigError


_PARTIAL_YAML = """\
content_dir: posts
log_file: logs/site.log

placeholders:
  card_colors: ["#112233", "445566"]

server:
  port: 8080
"""

_SINGLE_LANGUAGE_YAML = """\
canonical_language: en
languages:
  en:
    date_grammar: en
    read_more: More
    read_full: Full story
    listen_now: Listen
    source_html: legacy/index.html
    output_page: public/index.html
    top_template: tpl/top.html
    bottom_template: tpl/bottom.html
"""


class TestLoadConfig(unittest.TestCase):
    def _write(self, td: str, text: str) -> Path:
        p = Path(td) / "config.yaml"
        p.write_text(text, encoding="utf-8")
        return p

    def test_builtin_site(self) -> None:
        cfg = load_config(None)
        self.assertEqual(cfg.ordered_languages(), ["en", "fr", "he"])
        self.assertTrue(cfg.locale("he").rtl)
        self.assertEqual(cfg.locale("fr").source_html, "blog-fr.html")
        self.assertEqual(cfg.server.port, 3000)
        self.assertEqual(cfg, default_config())

    def test_partial_file_keeps_builtin_languages(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cfg = load_config(self._write(td, _PARTIAL_YAML))

        self.assertEqual(cfg.content_dir, "posts")
        self.assertEqual(cfg.log_file, "logs/site.log")
        self.assertEqual(cfg.placeholders.card_colors, ["112233", "445566"])
        self.assertEqual(cfg.server.port, 8080)
        self.assertEqual(sorted(cfg.languages), ["en", "fr", "he"])

    def test_empty_file_is_builtin_site(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cfg = load_config(self._write(td, ""))
        self.assertEqual(cfg, default_config())

    def test_custom_languages_replace_builtin(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cfg = load_config(self._write(td, _SINGLE_LANGUAGE_YAML))

        self.assertEqual(list(cfg.languages), ["en"])
        self.assertEqual(cfg.locale("en").arrow, "→")
        self.assertEqual(cfg.locale("en").category_label("team"), "team")
        with self.assertRaises(KeyError):
            cfg.locale("fr")

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ConfigError):
                load_config(Path(td) / "nope.yaml")

    def test_rejects_invalid_values(self) -> None:
        cases = {
            "unknown key": "colour: blue\n",
            "bad color": "placeholders:\n  featured_color: navy\n",
            "bad size": "placeholders:\n  card_size: 600\n",
            "bad port": "server:\n  port: 70000\n",
            "unknown canonical": "canonical_language: de\n",
            "not a mapping": "- a\n- b\n",
            "bad yaml": "server: [\n",
        }
        with tempfile.TemporaryDirectory() as td:
            for name, text in cases.items():
                with self.subTest(name=name):
                    with self.assertRaises(ConfigError):
                        load_config(self._write(td, text))

    def test_error_message_names_the_field(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ConfigError) as ctx:
                load_config(self._write(td, _SINGLE_LANGUAGE_YAML.replace("date_grammar: en", "date_grammar: de")))
        self.assertIn("languages.en.date_grammar", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
