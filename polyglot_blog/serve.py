from __future__ import annotations

from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import unquote, urlsplit

MIME_TYPES: dict[str, str] = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
}
DEFAULT_MIME_TYPE = "application/octet-stream"
NOT_FOUND_BODY = b"404 Not Found"


def content_type_for(path: str | Path) -> str:
    return MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_MIME_TYPE)


def resolve_request_path(root: Path, request_path: str, *, index_page: str = "index.html") -> Path | None:
    """Map a request path onto a file under ``root``; None for anything outside it."""
    path = unquote(urlsplit(request_path).path or "/")
    if path == "/":
        path = "/" + index_page
    if "\x00" in path:
        return None

    base = root.resolve()
    try:
        candidate = (base / path.lstrip("/")).resolve()
        candidate.relative_to(base)
    except (ValueError, OSError):
        # Over-long or otherwise unusable names, and paths outside the root.
        return None
    return candidate


def _read_file(path: Path) -> bytes | None:
    try:
        if not path.is_file():
            return None
        return path.read_bytes()
    except OSError:
        return None


def make_handler(root: str | Path, *, index_page: str = "index.html") -> type[BaseHTTPRequestHandler]:
    doc_root = Path(root)

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:
            target = resolve_request_path(doc_root, self.path, index_page=index_page)
            body = _read_file(target) if target is not None else None
            if target is None or body is None:
                return self.respond(HTTPStatus.NOT_FOUND, NOT_FOUND_BODY, "text/plain")
            self.respond(HTTPStatus.OK, body, content_type_for(target))

        def respond(self, status: HTTPStatus, body: bytes, content_type: str) -> None:
            self.send_response(status)
            self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, fmt: str, *args: object) -> None:
            return

    return Handler


def create_server(
    root: str | Path,
    *,
    host: str = "127.0.0.1",
    port: int = 3000,
    index_page: str = "index.html",
) -> ThreadingHTTPServer:
    return ThreadingHTTPServer((host, port), make_handler(root, index_page=index_page))


def serve(
    root: str | Path,
    *,
    host: str = "127.0.0.1",
    port: int = 3000,
    index_page: str = "index.html",
) -> None:
    server = create_server(root, host=host, port=port, index_page=index_page)
    bound_host, bound_port = server.server_address[:2]
    print(f"Serving on http://{bound_host}:{bound_port}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
