"""Hex color helpers and the color mixer.

>>> parse_hex('#FF8000')
(255, 128, 0)
>>> rgb_to_hex((127.5, 0, 300))
'#8000ff'
>>> mix_colors('#000000', '#ffffff')
'#808080'
>>> mix_colors('#ff0000', '#ffffff', 0.1)
'#ffe6e6'
"""
from __future__ import annotations

import dataclasses
import math
import re
from typing import Dict, Iterable, Tuple

HEX_PATTERN = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)
CANONICAL_PATTERN = re.compile(r"#[0-9a-f]{6}")
COLOR_FIELDS = ("averageColor", "dominantColor1", "dominantColor2")


@dataclasses.dataclass(frozen=True)
class ColorSet:
    average: str
    dominant1: str
    dominant2: str

    def as_fields(self) -> Dict[str, str]:
        return dict(zip(COLOR_FIELDS, (self.average, self.dominant1, self.dominant2)))


FALLBACK_COLORS = ColorSet("#000000", "#000000", "#ffffff")


def is_hex_color(value: object) -> bool:
    """True for canonical ``#rrggbb`` strings only.

    >>> is_hex_color('#0a0b0c')
    True
    >>> is_hex_color('#0A0B0C')
    False
    """
    return isinstance(value, str) and CANONICAL_PATTERN.fullmatch(value) is not None


def parse_hex(value: str) -> Tuple[int, int, int]:
    m = HEX_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if not m:
        raise ValueError(f"Invalid hex color: {value!r}")
    return (int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def _channel(value: float) -> int:
    # half-up, so 127.5 -> 128 like Math.round
    return max(0, min(255, int(math.floor(value + 0.5))))


def rgb_to_hex(rgb: Iterable[float]) -> str:
    return "#%02x%02x%02x" % tuple(_channel(c) for c in rgb)


def mix_colors(color1: str, color2: str, ratio: float = 0.5) -> str:
    """Blend ``color1`` into ``color2``; ``ratio`` is the weight of ``color1``.

    >>> mix_colors('#123456', '#abcdef', 1)
    '#123456'
    >>> mix_colors('#123456', '#abcdef', 0)
    '#abcdef'
    """
    if not 0.0 <= ratio <= 1.0:
        raise ValueError(f"Mix ratio must be within [0, 1], got {ratio}")
    rgb1 = parse_hex(color1)
    rgb2 = parse_hex(color2)
    return rgb_to_hex(a * ratio + b * (1 - ratio) for a, b in zip(rgb1, rgb2))
