#!/usr/bin/env python3
"""
Hex / RGB / HSL conversions.

Array forms work on (n, 3) numpy arrays; the scalar helpers wrap them so both
paths round identically. Invalid input yields None instead of raising.
"""

import re
from typing import NamedTuple, Optional

import numpy as np


# =============================================================================
# Types
# =============================================================================

class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    h: int
    s: int
    l: int


HEX_PATTERN = re.compile(r'#?([0-9a-f]{3}|[0-9a-f]{6})', re.IGNORECASE)
STRICT_HEX_PATTERN = re.compile(r'#[0-9a-f]{6}')


def round_half_up(x):
    """Round .5 away from zero for positive values, like Math.round."""
    return np.floor(np.asarray(x, dtype=np.float64) + 0.5)


# =============================================================================
# Array Conversion
# =============================================================================

def rgb_to_hsl(rgb: np.ndarray) -> np.ndarray:
    """Convert RGB array (0-255) to integer HSL (h 0-360, s/l 0-100)."""
    rgb_norm = np.asarray(rgb, dtype=np.float64).reshape(-1, 3) / 255.0
    r, g, b = rgb_norm[:, 0], rgb_norm[:, 1], rgb_norm[:, 2]

    cmax = rgb_norm.max(axis=1)
    cmin = rgb_norm.min(axis=1)
    d = cmax - cmin
    l = (cmax + cmin) / 2

    chromatic = d > 0
    safe_d = np.where(chromatic, d, 1.0)

    # Saturation
    denom = np.where(l > 0.5, 2 - cmax - cmin, cmax + cmin)
    s = np.where(chromatic, d / np.where(chromatic, denom, 1.0), 0.0)

    # Hue, channel priority r > g > b when several share the maximum
    h_r = ((g - b) / safe_d + np.where(g < b, 6, 0)) / 6
    h_g = ((b - r) / safe_d + 2) / 6
    h_b = ((r - g) / safe_d + 4) / 6
    h = np.select([cmax == r, cmax == g], [h_r, h_g], default=h_b)
    h = np.where(chromatic, h, 0.0)

    return np.column_stack([
        np.mod(round_half_up(h * 360), 360),
        round_half_up(s * 100),
        round_half_up(l * 100),
    ]).astype(np.int64)


def hsl_to_rgb(hsl: np.ndarray) -> np.ndarray:
    """Convert HSL array (h degrees, s/l percent) to RGB (0-255)."""
    hsl = np.asarray(hsl, dtype=np.float64).reshape(-1, 3)
    h = np.mod(hsl[:, 0], 360)
    s = np.clip(hsl[:, 1], 0, 100) / 100
    l = np.clip(hsl[:, 2], 0, 100) / 100

    a = s * np.minimum(l, 1 - l)

    def channel(n):
        k = np.mod(n + h / 30, 12)
        value = l - a * np.maximum(np.minimum(np.minimum(k - 3, 9 - k), 1), -1)
        return round_half_up(255 * np.clip(value, 0, 1))

    return np.column_stack([channel(0), channel(8), channel(4)]).astype(np.int64)


# =============================================================================
# Scalar Conversion
# =============================================================================

def hex_to_rgb(hex_color: str) -> Optional[RGB]:
    """Parse '#rgb' or '#rrggbb' (hash optional). Returns None if malformed."""
    if not isinstance(hex_color, str):
        return None
    match = HEX_PATTERN.fullmatch(hex_color)
    if not match:
        return None
    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Encode channels as lowercase '#rrggbb', clamping each to 0-255."""
    channels = np.clip(round_half_up([r, g, b]), 0, 255).astype(int)
    return '#' + ''.join(f"{int(c):02x}" for c in channels)


def normalize_hex(hex_color: str) -> Optional[str]:
    """Canonical lowercase 6-digit form, or None."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hex(*rgb)


def hex_to_hsl(hex_color: str) -> Optional[HSL]:
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    h, s, l = rgb_to_hsl(np.array([rgb]))[0]
    return HSL(int(h), int(s), int(l))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    rgb = hsl_to_rgb(np.array([[h, s, l]]))[0]
    return rgb_to_hex(*rgb)


def is_valid_hex(value) -> bool:
    """True for strict lowercase-or-uppercase '#rrggbb' strings."""
    return isinstance(value, str) and STRICT_HEX_PATTERN.fullmatch(value.lower()) is not None
