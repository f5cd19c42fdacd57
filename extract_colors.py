#!/usr/bin/env python3
"""
Extract a five-color palette from image bytes without a vision service.

Two strategies share one hue-bucket clustering step:
  - extract_colors_from_image: decode with Pillow and sample real pixels
  - extract_colors_from_buffer: sample raw byte triples from the file itself

Neither raises. When too few colors come out, a fixed default palette is used.
"""

import io

import numpy as np
from PIL import Image

from color_model import hsl_to_hex, rgb_to_hsl
from color_names import name_colors


# =============================================================================
# Constants
# =============================================================================

DEFAULT_PALETTE = ('#4f46e5', '#7c3aed', '#ec4899', '#f59e0b', '#10b981')

PALETTE_SIZE = 5
MIN_COLORS = 3  # Fewer than this and the default palette is returned

# Byte sampling
MAX_BYTE_SAMPLES = 200
HEADER_SKIP_MAX = 100  # Bytes; also capped at 10% of the buffer
MIN_BYTE_STEP = 3

# Output clamps, keeps colors away from muddy or blown-out extremes
SATURATION_CLAMP = (25, 85)
LIGHTNESS_CLAMP = (20, 80)

# Image size limits (security: prevent decompression bombs)
MAX_IMAGE_PIXELS = 50_000_000  # 50 megapixels
MAX_IMAGE_DIMENSION = 10_000  # 10k pixels per side
DOWNSCALE_SIZE = 256
MAX_PIXEL_SAMPLES = 4096


def default_palette() -> list:
    return name_colors(DEFAULT_PALETTE)


# =============================================================================
# Clustering
# =============================================================================

def cluster_hsl(hsl: np.ndarray, n_buckets: int = PALETTE_SIZE) -> list:
    """
    Sort samples by hue, split into contiguous buckets, average each bucket.

    Args:
        hsl: Array of shape (n, 3) with columns [h, s, l]
        n_buckets: Number of buckets (colors) to produce

    Returns:
        List of hex strings, one per non-empty bucket, in hue order.
    """
    if len(hsl) == 0:
        return []

    hsl = np.asarray(hsl, dtype=np.float64)
    ordered = hsl[np.argsort(hsl[:, 0], kind='stable')]

    colors = []
    for bucket in np.array_split(ordered, n_buckets):
        if len(bucket) == 0:
            continue
        h, s, l = bucket.mean(axis=0)
        s = np.clip(s, *SATURATION_CLAMP)
        l = np.clip(l, *LIGHTNESS_CLAMP)
        colors.append(hsl_to_hex(h, s, l))

    return colors


def _finish(hex_colors: list) -> list:
    if len(hex_colors) < MIN_COLORS:
        return default_palette()
    return name_colors(hex_colors)


# =============================================================================
# Byte Heuristic
# =============================================================================

def sample_byte_triples(data: np.ndarray) -> np.ndarray:
    """
    Evenly spaced (r, g, b) byte triples after skipping the file header.

    Returns:
        uint8 array of shape (n, 3), n <= MAX_BYTE_SAMPLES.
    """
    length = len(data)
    start = min(HEADER_SKIP_MAX, length // 10)
    step = max(MIN_BYTE_STEP, length // MAX_BYTE_SAMPLES)

    offsets = np.arange(start, length - 2, step)[:MAX_BYTE_SAMPLES]
    if len(offsets) == 0:
        return np.empty((0, 3), dtype=np.uint8)

    return np.column_stack([data[offsets], data[offsets + 1], data[offsets + 2]])


def extract_colors_from_buffer(buffer) -> list:
    """Palette from raw bytes. Falls back to DEFAULT_PALETTE, never raises."""
    if not isinstance(buffer, (bytes, bytearray, memoryview)):
        return default_palette()

    data = np.frombuffer(bytes(buffer), dtype=np.uint8)
    triples = sample_byte_triples(data)
    if len(triples) == 0:
        return default_palette()

    return _finish(cluster_hsl(rgb_to_hsl(triples)))


# =============================================================================
# Decoded Pixels
# =============================================================================

def load_pixels(data: bytes) -> np.ndarray:
    """
    Decode image bytes to an (n, 3) RGB array, downscaled for speed.

    Raises:
        ValueError: If the bytes are not a valid image or exceed size limits
    """
    try:
        img = Image.open(io.BytesIO(data))
    except Exception as e:
        raise ValueError(f"Could not open image: {e}")

    # Validate image dimensions (security: prevent decompression bombs)
    width, height = img.size
    if width > MAX_IMAGE_DIMENSION or height > MAX_IMAGE_DIMENSION:
        raise ValueError(
            f"Image dimensions {width}x{height} exceed maximum "
            f"{MAX_IMAGE_DIMENSION}x{MAX_IMAGE_DIMENSION}"
        )
    if width * height > MAX_IMAGE_PIXELS:
        raise ValueError(
            f"Image has {width * height:,} pixels, exceeding maximum {MAX_IMAGE_PIXELS:,}"
        )

    try:
        img = img.convert('RGB')
        img.thumbnail((DOWNSCALE_SIZE, DOWNSCALE_SIZE))
    except Exception as e:
        raise ValueError(f"Could not decode image: {e}")

    return np.array(img).reshape(-1, 3)


def extract_colors_from_image(data) -> list:
    """
    Palette from an encoded image (PNG, JPEG, ...).

    Undecodable input goes through extract_colors_from_buffer instead.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        return default_palette()

    try:
        pixels = load_pixels(bytes(data))
    except ValueError:
        return extract_colors_from_buffer(data)

    if len(pixels) == 0:
        return extract_colors_from_buffer(data)

    count = min(len(pixels), MAX_PIXEL_SAMPLES)
    indices = np.linspace(0, len(pixels) - 1, num=count).astype(np.int64)

    return _finish(cluster_hsl(rgb_to_hsl(pixels[indices])))
