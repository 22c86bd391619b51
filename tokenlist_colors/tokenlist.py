"""Read and write token list documents."""
from __future__ import annotations

import json
import os
from typing import Any, Dict

TOKENS_KEY = "tokens"


class TokenListError(Exception):
    """The token list could not be read or does not have the expected shape."""


def has_logo(token: Any, logo_field: str) -> bool:
    """
    >>> has_logo({'logoURI': 'https://x/y.png'}, 'logoURI')
    True
    >>> has_logo({'logoURI': ''}, 'logoURI')
    False
    """
    return isinstance(token, dict) and isinstance(token.get(logo_field), str) and bool(token[logo_field])


def load_tokenlist(path: str, tokens_key: str = TOKENS_KEY) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise TokenListError(f"Token list not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise TokenListError(f"Token list is not valid JSON: {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise TokenListError(f"Cannot read token list {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TokenListError(f"Token list must be a JSON object: {path}")
    if not isinstance(data.get(tokens_key), list):
        raise TokenListError(f"Token list has no '{tokens_key}' array: {path}")
    return data


def atomic_write(path: str, content: str) -> None:
    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        f.write(content)
    os.replace(tmp, path)


def write_tokenlist(path: str, data: Dict[str, Any]) -> None:
    atomic_write(path, json.dumps(data, ensure_ascii=False, indent=4))
