# src/task_dashboard/server/http_server.py

"""
Local HTTP server for live-refresh mode.

Routes (GET and HEAD):
- /version      -> current build counter as text/plain (polled by the pages)
- /             -> dashboard.html
- anything else -> a file from the output directory, looked up by basename only
"""

from __future__ import annotations

import logging
import posixpath
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import unquote, urlsplit

from ..core.build import DASHBOARD_FILENAME
from ..core.ports import VersionSource

logger = logging.getLogger(__name__)
access_logger = logging.getLogger(__name__ + ".access")

VERSION_ROUTE = "/version"

MIME_TYPES: dict[str, str] = {
    ".html": "text/html; charset=utf-8",
    ".css": "text/css",
    ".js": "application/javascript",
}


def resolve_static_path(out_dir: Path, request_path: str) -> Path | None:
    """
    Map a request path onto a file in out_dir.

    Only the last path segment is used, so "../" and nested paths can never
    leave out_dir. Returns None when there is no such file.
    """
    path = unquote(urlsplit(request_path).path)
    if path in ("", "/"):
        path = "/" + DASHBOARD_FILENAME

    name = posixpath.basename(path.replace("\\", "/"))
    if name in ("", ".", ".."):
        return None

    candidate = out_dir / name
    if not candidate.is_file():
        return None
    return candidate


class DashboardRequestHandler(BaseHTTPRequestHandler):
    server: "DashboardHTTPServer"

    def do_GET(self) -> None:
        self._respond(include_body=True)

    def do_HEAD(self) -> None:
        self._respond(include_body=False)

    def _respond(self, *, include_body: bool) -> None:
        if urlsplit(self.path).path == VERSION_ROUTE:
            body = str(self.server.versions.value).encode("utf-8")
            self._send(200, "text/plain", body, include_body=include_body)
            return

        file_path = resolve_static_path(self.server.out_dir, self.path)
        if file_path is None:
            self._send(404, "text/plain", b"Not found", include_body=include_body)
            return

        content_type = MIME_TYPES.get(file_path.suffix, "application/octet-stream")
        self._send(200, content_type, file_path.read_bytes(), include_body=include_body)

    def _send(self, status: int, content_type: str, body: bytes, *, include_body: bool = True) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        # HEAD reports the length the GET body would have.
        self.send_header("Content-Length", str(len(body)))
        self.send_header("Cache-Control", "no-store")
        self.end_headers()
        if include_body:
            self.wfile.write(body)

    def log_message(self, format: str, *args) -> None:
        access_logger.debug("%s %s", self.address_string(), format % args)


class DashboardHTTPServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, address: tuple[str, int], out_dir: Path, versions: VersionSource) -> None:
        self.out_dir = Path(out_dir)
        self.versions = versions
        super().__init__(address, DashboardRequestHandler)

    @property
    def url(self) -> str:
        host, port = self.server_address[:2]
        if host in ("", "0.0.0.0", "127.0.0.1"):
            host = "localhost"
        return f"http://{host}:{port}"


def start_server(
    out_dir: Path,
    versions: VersionSource,
    *,
    host: str = "127.0.0.1",
    port: int = 4242,
) -> tuple[DashboardHTTPServer, threading.Thread]:
    """
    Bind the server and run it in a daemon thread.

    Binding errors (port in use) raise OSError to the caller.
    Stop with httpd.shutdown(); httpd.server_close().
    """
    httpd = DashboardHTTPServer((host, port), out_dir, versions)
    thread = threading.Thread(target=httpd.serve_forever, name="dashboard-http", daemon=True)
    thread.start()
    logger.debug("HTTP server listening on %s", httpd.url)
    return httpd, thread
