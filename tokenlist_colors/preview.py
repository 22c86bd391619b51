"""Static HTML preview of token colors."""
from __future__ import annotations

import html
from typing import Any, List, Sequence

from tokenlist_colors.tokenlist import atomic_write

CSS = """
    body {
      font-family: Arial, sans-serif;
      margin: 20px;
      background: #f0f0f0;
    }
    .token-grid {
      display: grid;
      grid-template-columns: repeat(auto-fill, minmax(300px, 1fr));
      gap: 20px;
      padding: 20px;
    }
    .token-card {
      background: white;
      border-radius: 8px;
      padding: 15px;
      box-shadow: 0 2px 4px rgba(0,0,0,0.1);
    }
    .token-header {
      display: flex;
      align-items: center;
      margin-bottom: 15px;
    }
    .token-logo {
      width: 40px;
      height: 40px;
      margin-right: 10px;
    }
    .token-name {
      font-weight: bold;
      font-size: 1.1em;
    }
    .color-grid {
      display: grid;
      grid-template-columns: repeat(2, 1fr);
      gap: 10px;
    }
    .color-item {
      display: flex;
      flex-direction: column;
      align-items: center;
    }
    .color-label {
      font-size: 0.8em;
      margin-bottom: 5px;
      color: #666;
    }
    .color-box, .gradient-box {
      width: 100%;
      height: 30px;
      border-radius: 4px;
    }
    .gradient-box {
      background: linear-gradient(45deg, var(--color1), var(--color2));
    }
"""


def _field(token: Any, name: str) -> str:
    value = token.get(name) if isinstance(token, dict) else None
    return html.escape(str(value)) if value is not None else ""


def _swatch(label: str, color: str) -> str:
    return (
        f"<div class=\"color-item\"><div class=\"color-label\">{label}</div>"
        f"<div class=\"color-box\" style=\"background-color: {color}\"></div></div>"
    )


def build_card(token: Any, logo_field: str = "logoURI", symbol_field: str = "symbol") -> str:
    symbol = _field(token, symbol_field)
    average = _field(token, "averageColor")
    dominant1 = _field(token, "dominantColor1")
    dominant2 = _field(token, "dominantColor2")
    swatches = "".join(
        [
            _swatch("Average Color", average),
            _swatch("Dominant Color 1", dominant1),
            _swatch("Dominant Color 2", dominant2),
            "<div class=\"color-item\"><div class=\"color-label\">Gradient (45&deg;)</div>"
            f"<div class=\"gradient-box\" style=\"--color1: {dominant1}; --color2: {dominant2}\"></div></div>",
        ]
    )
    return f"""
    <div class="token-card">
      <div class="token-header">
        <img src="{_field(token, logo_field)}" class="token-logo" alt="{symbol}">
        <div class="token-name">{symbol}</div>
      </div>
      <div class="color-grid">{swatches}</div>
    </div>"""


def build_preview(tokens: Sequence[Any], logo_field: str = "logoURI", symbol_field: str = "symbol") -> str:
    cards: List[str] = [build_card(token, logo_field, symbol_field) for token in tokens]
    body = "".join(cards)
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Token Colors Preview</title>
  <style>{CSS}</style>
</head>
<body>
  <div class="token-grid">{body}
  </div>
</body>
</html>
"""


def write_preview(path: str, tokens: Sequence[Any], logo_field: str = "logoURI", symbol_field: str = "symbol") -> None:
    atomic_write(path, build_preview(tokens, logo_field, symbol_field))
