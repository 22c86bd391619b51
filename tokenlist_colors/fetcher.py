"""Download logo images. Failures are logged and turned into ``None``."""
from __future__ import annotations

import logging
import urllib.parse
from typing import Optional

import requests

logger = logging.getLogger(__name__)

USER_AGENT = "TokenlistColors/1.0"
DEFAULT_TIMEOUT = 15
DEFAULT_MAX_BYTES = 5_000_000
CHUNK_SIZE = 64 * 1024


class ImageFetcher:
    """Thin wrapper around a requests session for easier mocking/testing."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_bytes: int = DEFAULT_MAX_BYTES,
        user_agent: str = USER_AGENT,
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout
        self.max_bytes = max_bytes
        self.user_agent = user_agent

    def _download(self, url: str) -> bytes:
        parsed = urllib.parse.urlparse(url)
        if parsed.scheme not in {"http", "https"}:
            raise ValueError("Only http/https allowed")
        if not parsed.hostname:
            raise ValueError("Invalid URL: missing host")
        with self.session.get(
            url,
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
            stream=True,
        ) as resp:
            resp.raise_for_status()
            chunks = []
            seen = 0
            for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                seen += len(chunk)
                if seen > self.max_bytes:
                    raise ValueError(f"Response exceeds byte limit ({self.max_bytes})")
                chunks.append(chunk)
            return b"".join(chunks)

    def fetch(self, url: str) -> Optional[bytes]:
        try:
            data = self._download(url)
        except Exception as exc:  # noqa: BLE001
            logger.error("Error downloading %s: %s", url, exc)
            return None
        logger.debug("Downloaded %d bytes from %s", len(data), url)
        return data

    def close(self) -> None:
        self.session.close()
