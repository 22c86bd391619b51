"""Average and dominant colors of a logo image.

The image bytes are spooled to a scratch directory, decoded with Pillow and
reduced to one average color plus a two-entry median-cut palette ranked by
pixel count. Anything that goes wrong yields ``FALLBACK_COLORS``.
"""
from __future__ import annotations

import dataclasses
import logging
import os
import tempfile
from typing import List, Optional, Tuple

from PIL import Image, ImageStat

from tokenlist_colors.colors import FALLBACK_COLORS, ColorSet, mix_colors, rgb_to_hex

logger = logging.getLogger(__name__)

PALETTE_SIZE = 2
SAMPLE_SIZE = 256
ALPHA_THRESHOLD = 125
LIGHTEN_TOWARD = "#ffffff"
LIGHTEN_RATIO = 0.1

RGB = Tuple[int, int, int]


@dataclasses.dataclass(frozen=True)
class Extraction:
    colors: ColorSet
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _opaque_mask(rgba: Image.Image) -> Optional[Image.Image]:
    mask = rgba.getchannel("A").point(lambda a: 255 if a >= ALPHA_THRESHOLD else 0)
    if mask.getbbox() is None:
        # fully transparent: analyze every pixel
        return None
    return mask


def average_color(rgb: Image.Image, mask: Optional[Image.Image] = None) -> Tuple[float, float, float]:
    r, g, b = ImageStat.Stat(rgb, mask).mean[:3]
    return (r, g, b)


def opaque_pixels(rgb: Image.Image, mask: Optional[Image.Image] = None) -> Image.Image:
    """Strip of the pixels ``mask`` keeps, so masked-out pixels never reach the quantizer."""
    if mask is None:
        return rgb
    pixels = [p for p, m in zip(rgb.getdata(), mask.getdata()) if m]
    strip = Image.new("RGB", (len(pixels), 1))
    strip.putdata(pixels)
    return strip


def dominant_palette(rgb: Image.Image, mask: Optional[Image.Image] = None, size: int = PALETTE_SIZE) -> List[RGB]:
    """Median-cut palette, most prevalent entry first, unused entries dropped."""
    quantized = opaque_pixels(rgb, mask).quantize(colors=size, method=Image.Quantize.MEDIANCUT)
    counts = quantized.histogram()
    values = quantized.getpalette() or []
    ranked = sorted((i for i, n in enumerate(counts) if n), key=lambda i: (-counts[i], i))
    palette: List[RGB] = []
    for index in ranked[:size]:
        entry = values[index * 3:index * 3 + 3]
        if len(entry) == 3:
            palette.append((entry[0], entry[1], entry[2]))
    return palette


def analyze_image(path: str) -> ColorSet:
    with Image.open(path) as img:
        rgba = img.convert("RGBA")
    rgba.thumbnail((SAMPLE_SIZE, SAMPLE_SIZE))
    mask = _opaque_mask(rgba)
    rgb = rgba.convert("RGB")

    average = rgb_to_hex(average_color(rgb, mask))
    palette = dominant_palette(rgb, mask)
    dominant1 = rgb_to_hex(palette[0]) if palette else "#000000"
    if len(palette) > 1:
        dominant2 = rgb_to_hex(palette[1])
    else:
        dominant2 = mix_colors(dominant1, LIGHTEN_TOWARD, LIGHTEN_RATIO)
    return ColorSet(average, dominant1, dominant2)


def extract_colors(image_bytes: Optional[bytes]) -> Extraction:
    if not image_bytes:
        return Extraction(FALLBACK_COLORS, "no image data")
    try:
        with tempfile.TemporaryDirectory(prefix="logo_") as tmp:
            path = os.path.join(tmp, "logo.img")
            with open(path, "wb") as f:
                f.write(image_bytes)
            colors = analyze_image(path)
    except Exception as exc:  # noqa: BLE001
        logger.error("Error processing image: %s", exc)
        return Extraction(FALLBACK_COLORS, str(exc) or exc.__class__.__name__)
    return Extraction(colors)
