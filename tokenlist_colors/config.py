"""Run settings, with defaults taken from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass

from tokenlist_colors.fetcher import DEFAULT_MAX_BYTES, DEFAULT_TIMEOUT, USER_AGENT

DEFAULT_INPUT = "plyrapi.tokenlist.json"
DEFAULT_PREVIEW = "token_colors.html"


@dataclass
class Settings:
    input_path: str = DEFAULT_INPUT
    preview_path: str = DEFAULT_PREVIEW
    tokens_key: str = "tokens"
    logo_field: str = "logoURI"
    symbol_field: str = "symbol"
    timeout: float = DEFAULT_TIMEOUT
    max_bytes: int = DEFAULT_MAX_BYTES
    user_agent: str = USER_AGENT
    dry_run: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            input_path=os.getenv("TOKENLIST_PATH", DEFAULT_INPUT),
            preview_path=os.getenv("TOKENLIST_PREVIEW", DEFAULT_PREVIEW),
            timeout=float(os.getenv("TOKENLIST_TIMEOUT", DEFAULT_TIMEOUT)),
            max_bytes=int(os.getenv("TOKENLIST_MAX_BYTES", DEFAULT_MAX_BYTES)),
            user_agent=os.getenv("TOKENLIST_USER_AGENT", USER_AGENT),
        )
