# tests/test_http_server.py

from __future__ import annotations

import http.client
from collections.abc import Iterator
from pathlib import Path

import pytest

from task_dashboard.core.state import BuildCounter
from task_dashboard.server.http_server import DashboardHTTPServer, resolve_static_path, start_server


@pytest.fixture()
def out_dir(tmp_path: Path) -> Path:
    out = tmp_path / "_site"
    out.mkdir()
    (out / "dashboard.html").write_text("<h1>dash</h1>", encoding="utf-8")
    (out / "notepad.html").write_text("<h1>notes</h1>", encoding="utf-8")
    (out / "extra.css").write_text("body{}", encoding="utf-8")
    (out / "blob.bin").write_bytes(b"\x00\x01")
    # Outside the output directory; must never be reachable.
    (tmp_path / "secret.txt").write_text("top secret", encoding="utf-8")
    return out


@pytest.fixture()
def counter() -> BuildCounter:
    return BuildCounter()


@pytest.fixture()
def server(out_dir: Path, counter: BuildCounter) -> Iterator[DashboardHTTPServer]:
    httpd, thread = start_server(out_dir, counter, host="127.0.0.1", port=0)
    try:
        yield httpd
    finally:
        httpd.shutdown()
        httpd.server_close()
        thread.join(timeout=5.0)


def _get(httpd: DashboardHTTPServer, path: str) -> tuple[int, str, bytes]:
    host, port = httpd.server_address[:2]
    conn = http.client.HTTPConnection(host, port, timeout=5.0)
    try:
        conn.request("GET", path)
        resp = conn.getresponse()
        return resp.status, resp.getheader("Content-Type") or "", resp.read()
    finally:
        conn.close()


def test_version_reflects_counter(server: DashboardHTTPServer, counter: BuildCounter) -> None:
    assert _get(server, "/version") == (200, "text/plain", b"0")
    counter.increment()
    counter.increment()
    status, _ctype, body = _get(server, "/version")
    assert (status, body) == (200, b"2")


def test_root_serves_dashboard(server: DashboardHTTPServer) -> None:
    status, ctype, body = _get(server, "/")
    assert status == 200
    assert ctype.startswith("text/html")
    assert body == b"<h1>dash</h1>"


def test_static_files_and_content_types(server: DashboardHTTPServer) -> None:
    assert _get(server, "/notepad.html")[2] == b"<h1>notes</h1>"
    assert _get(server, "/notepad.html?v=3")[2] == b"<h1>notes</h1>"
    assert _get(server, "/extra.css")[1] == "text/css"
    assert _get(server, "/blob.bin")[1] == "application/octet-stream"


def test_paths_are_reduced_to_basename(server: DashboardHTTPServer) -> None:
    status, _ctype, body = _get(server, "/some/nested/dashboard.html")
    assert (status, body) == (200, b"<h1>dash</h1>")


@pytest.mark.parametrize(
    "path",
    ["/../secret.txt", "/..%2Fsecret.txt", "/%2e%2e", "/missing.html", "/notes/"],
)
def test_traversal_and_unknown_files_are_404(server: DashboardHTTPServer, path: str) -> None:
    status, _ctype, body = _get(server, path)
    assert status == 404
    assert body == b"Not found"


def test_resolve_static_path(out_dir: Path) -> None:
    assert resolve_static_path(out_dir, "/") == out_dir / "dashboard.html"
    assert resolve_static_path(out_dir, "/a/b/notepad.html") == out_dir / "notepad.html"
    assert resolve_static_path(out_dir, "/..\\secret.txt") is None
    assert resolve_static_path(out_dir, "/..") is None


def test_url_uses_localhost(server: DashboardHTTPServer) -> None:
    assert server.url.startswith("http://localhost:")


def _head(httpd: DashboardHTTPServer, path: str) -> tuple[int, str | None, bytes]:
    host, port = httpd.server_address[:2]
    conn = http.client.HTTPConnection(host, port, timeout=5.0)
    try:
        conn.request("HEAD", path)
        resp = conn.getresponse()
        return resp.status, resp.getheader("Content-Length"), resp.read()
    finally:
        conn.close()


def test_head_sends_headers_without_body(server: DashboardHTTPServer, counter: BuildCounter) -> None:
    assert _head(server, "/dashboard.html") == (200, str(len(b"<h1>dash</h1>")), b"")
    assert _head(server, "/") == (200, str(len(b"<h1>dash</h1>")), b"")
    counter.increment()
    assert _head(server, "/version") == (200, "1", b"")
    assert _head(server, "/missing.html") == (404, str(len(b"Not found")), b"")
