import io
import json
from typing import Dict, List, Optional, Sequence, Tuple

import pytest
import requests
from PIL import Image


def make_image_bytes(
    pixels: Sequence[Tuple[Tuple[int, ...], int]],
    mode: str = "RGB",
    width: int = 10,
    fmt: str = "PNG",
) -> bytes:
    """Build an image from (color, count) runs laid out row by row."""
    flat: List[Tuple[int, ...]] = []
    for color, count in pixels:
        flat.extend([color] * count)
    height = len(flat) // width
    img = Image.new(mode, (width, height))
    img.putdata(flat[: width * height])
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


class FakeResponse:
    def __init__(self, status_code: int = 200, body: bytes = b"", url: str = "") -> None:
        self.status_code = status_code
        self.body = body
        self.url = url

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error for url: {self.url}")

    def iter_content(self, chunk_size: int = 1):
        for start in range(0, len(self.body), chunk_size):
            yield self.body[start:start + chunk_size]


class FakeSession:
    """Maps URLs to responses or exceptions and records requests."""

    def __init__(self, routes: Optional[Dict[str, object]] = None) -> None:
        self.routes = routes or {}
        self.calls: List[Tuple[str, dict]] = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        target = self.routes.get(url)
        if target is None:
            raise requests.ConnectionError(f"Failed to resolve host for {url}")
        if isinstance(target, Exception):
            raise target
        if isinstance(target, FakeResponse):
            return target
        return FakeResponse(200, target, url)

    def close(self) -> None:
        self.closed = True


class RecordingReporter:
    def __init__(self) -> None:
        self.events: List[tuple] = []

    def started(self, total):
        self.events.append(("started", total))

    def token_started(self, symbol, position, total):
        self.events.append(("token_started", symbol, position, total))

    def token_finished(self, outcome):
        self.events.append(("token_finished", outcome.symbol, outcome.status))

    def completed(self, summary, dry_run=False):
        self.events.append(("completed", dry_run))

    def failed(self, message):
        self.events.append(("failed", message))


@pytest.fixture
def red_png() -> bytes:
    return make_image_bytes([((255, 0, 0), 100)])


@pytest.fixture
def write_json(tmp_path):
    def _write(data, name="plyrapi.tokenlist.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=4), encoding="utf-8")
        return path

    return _write
