"""Test helpers: synthetic ZIP archives and an offline HTTP session."""

from __future__ import annotations

import io
import json
import zipfile
from pathlib import Path
from typing import Mapping

import requests


def make_zip(path: Path, members: Mapping[str, bytes | str | None]) -> Path:
    """Write a ZIP at *path*; a ``None`` value creates a directory member."""
    with zipfile.ZipFile(path, "w") as zf:
        for name, data in members.items():
            if data is None:
                zf.writestr(name if name.endswith("/") else name + "/", b"")
            else:
                zf.writestr(name, data)
    return path


def zip_bytes(members: Mapping[str, bytes | str | None]) -> bytes:
    """Return the bytes of a ZIP holding *members* (see :func:`make_zip`)."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, data in members.items():
            if data is None:
                zf.writestr(name if name.endswith("/") else name + "/", b"")
            else:
                zf.writestr(name, data)
    return buf.getvalue()


def index_bytes(entries: Mapping[str, str]) -> bytes:
    """Encode ``name → URL`` pairs the way the Chaos index does."""
    return json.dumps(
        [{"name": n, "URL": u, "count": 1} for n, u in entries.items()]
    ).encode()


def make_response(url: str, body: bytes = b"", status: int = 200) -> requests.Response:
    """Build a real :class:`requests.Response` backed by an in-memory body."""
    resp = requests.Response()
    resp.status_code = status
    resp.reason = "OK" if status < 400 else "Error"
    resp.url = url
    resp.raw = io.BytesIO(body)
    return resp


class FakeSession(requests.Session):
    """Session that serves canned responses instead of touching the network.

    ``routes`` maps a URL to response bytes, an HTTP status code, or an
    exception instance to raise. Unknown URLs answer 404.
    """

    def __init__(self, routes: Mapping[str, object]):
        super().__init__()
        self.routes = dict(routes)
        self.calls: list[tuple[str, dict]] = []
        self.closed = False

    def close(self):
        self.closed = True
        super().close()

    def get(self, url, **kwargs):  # noqa: D401 - mirrors requests.Session.get
        self.calls.append((url, kwargs))
        target = self.routes.get(url, 404)
        if isinstance(target, BaseException):
            raise target
        if isinstance(target, int):
            return make_response(url, b"", target)
        return make_response(url, target)


def corrupt_deflate_zip(name: str = "hosts.txt") -> bytes:
    """Return a ZIP whose single deflated member has a damaged data stream.

    The central directory stays intact so the archive opens; reading the
    member fails part-way through decompression.
    """
    payload = b"".join(f"{i}.host.example\n".encode() for i in range(5000))
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr(name, payload)
        info = zf.getinfo(name)
    data = bytearray(buf.getvalue())

    # Local header: 30 fixed bytes, then filename and extra field.
    start = 30 + len(info.filename.encode()) + len(info.extra)
    middle = start + info.compress_size // 2
    for i in range(middle, middle + 40):
        data[i] ^= 0xFF
    return bytes(data)
