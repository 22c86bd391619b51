"""Insert derived colors into a token record right after its logo field.

>>> merge_colors({'symbol': 'X', 'logoURI': 'u', 'decimals': 6}, ColorSet('#010203', '#040506', '#070809'))
{'symbol': 'X', 'logoURI': 'u', 'averageColor': '#010203', 'dominantColor1': '#040506', 'dominantColor2': '#070809', 'decimals': 6}
"""
from __future__ import annotations

from typing import Any, Dict, Mapping

from tokenlist_colors.colors import COLOR_FIELDS, ColorSet

LOGO_FIELD = "logoURI"


def merge_colors(token: Mapping[str, Any], colors: ColorSet, logo_field: str = LOGO_FIELD) -> Dict[str, Any]:
    if logo_field not in token:
        raise KeyError(logo_field)
    merged: Dict[str, Any] = {}
    for key, value in token.items():
        # stale colors from an earlier run are re-inserted after the logo
        if key in COLOR_FIELDS:
            continue
        merged[key] = value
        if key == logo_field:
            merged.update(colors.as_fields())
    return merged
