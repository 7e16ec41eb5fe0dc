from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from .build import run_build
from .config import load_config
from .config_schema import SiteConfig
from .errors import (
    ConfigError,
    GenerationError,
    ResourceMissingError,
    ScreenshotError,
    StorageError,
)
from .migrate import run_migration
from .run_log import RunLogger


def _add_site_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        default=".",
        help="Site root holding pages, templates and content (default: current directory).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file (default: built-in en/fr/he site).",
    )
    parser.add_argument(
        "--log",
        default=None,
        help="Path of the JSONL run log (default: <root>/<log_file from config>).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="polyglot_blog")

    subparsers = parser.add_subparsers(dest="command", required=True)

    migrate = subparsers.add_parser(
        "migrate",
        help="Extract posts from the legacy language pages into structured documents.",
    )
    _add_site_args(migrate)
    migrate.set_defaults(_handler=_cmd_migrate)

    build = subparsers.add_parser(
        "build",
        help="Generate the language pages from structured documents and templates.",
    )
    _add_site_args(build)
    build.add_argument(
        "--lang",
        action="append",
        default=None,
        help="Only build this language (repeatable).",
    )
    build.set_defaults(_handler=_cmd_build)

    serve = subparsers.add_parser("serve", help="Serve the site root over HTTP.")
    serve.add_argument("--root", default=".", help="Document root.")
    serve.add_argument("--config", default=None, help="Path to YAML config file.")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.set_defaults(_handler=_cmd_serve)

    shot = subparsers.add_parser(
        "screenshot", help="Capture a full-page screenshot with a headless browser."
    )
    shot.add_argument("url", nargs="?", default=None)
    shot.add_argument("label", nargs="?", default="")
    shot.add_argument("--config", default=None, help="Path to YAML config file.")
    shot.add_argument("--out-dir", default=None)
    shot.set_defaults(_handler=_cmd_screenshot)

    return parser


def _eprint(message: str) -> None:
    print(message, file=sys.stderr)


def _log_path(args: argparse.Namespace, cfg: SiteConfig | None) -> Path:
    if args.log:
        return Path(args.log)
    name = cfg.log_file if cfg is not None else "polyglot_blog.log"
    return Path(args.root) / name


def _try_load_config(path: str | None) -> tuple[SiteConfig | None, ConfigError | None]:
    try:
        return load_config(path), None
    except ConfigError as e:
        return None, e


def _require_config(cfg: SiteConfig | None, error: ConfigError | None) -> SiteConfig:
    if cfg is None:
        raise error or ConfigError("Configuration unavailable")
    return cfg


def _cmd_migrate(args: argparse.Namespace) -> int:
    cfg, cfg_error = _try_load_config(args.config)

    with RunLogger.open(_log_path(args, cfg)) as log:
        log.info("migrate_command_started", root=str(args.root), config_path=args.config)
        try:
            site = _require_config(cfg, cfg_error)

            result = run_migration(site, args.root, logger=log)
            log.info("migrate_command_completed", documents=result.documents)
        except Exception as e:
            log.exception("migrate_command_failed", exc=e)
            raise

    for item in result.languages:
        print(f"{item.lang}: featured={item.featured} cards={item.cards}")
    print(f"documents={result.documents}")
    return 0


def _cmd_build(args: argparse.Namespace) -> int:
    cfg, cfg_error = _try_load_config(args.config)

    with RunLogger.open(_log_path(args, cfg)) as log:
        log.info("build_command_started", root=str(args.root), config_path=args.config)
        try:
            site = _require_config(cfg, cfg_error)

            languages = args.lang or None
            unknown = [code for code in (languages or []) if code not in site.languages]
            if unknown:
                raise ConfigError(f"Unknown language(s): {', '.join(unknown)}")

            result = run_build(site, args.root, languages=languages, logger=log)
            log.info("build_command_completed", pages=len(result.pages))
        except Exception as e:
            log.exception("build_command_failed", exc=e)
            raise

    for page in result.pages:
        print(f"{page.lang}: {page.output} featured={page.featured_slug} cards={page.cards}")
    print(f"pages={len(result.pages)}")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    from .serve import serve

    cfg = load_config(args.config)
    serve(
        args.root,
        host=args.host or cfg.server.host,
        port=args.port if args.port is not None else cfg.server.port,
        index_page=cfg.server.index_page,
    )
    return 0


def _cmd_screenshot(args: argparse.Namespace) -> int:
    from .screenshot import capture_screenshot

    cfg = load_config(args.config)
    path = capture_screenshot(
        args.url or cfg.screenshot.url,
        label=args.label,
        config=cfg.screenshot,
        out_dir=args.out_dir,
    )
    print(f"screenshot={path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        handler = getattr(args, "_handler")
        return int(handler(args))
    except ConfigError as e:
        _eprint(str(e))
        return 2
    except (ResourceMissingError, StorageError, GenerationError, ScreenshotError) as e:
        _eprint(str(e))
        return 3
    except KeyboardInterrupt:
        _eprint("Interrupted")
        return 130
    except Exception as e:
        _eprint(f"Unexpected error: {e}")
        return 1
