import io

import pytest
from PIL import Image


def make_png(size=64, quadrants=((255, 0, 0), (255, 255, 0), (0, 255, 0), (0, 0, 255))) -> bytes:
    """Square PNG split into four solid quadrants."""
    img = Image.new('RGB', (size, size))
    half = size // 2
    boxes = [(0, 0, half, half), (half, 0, size, half), (0, half, half, size), (half, half, size, size)]
    for box, color in zip(boxes, quadrants):
        img.paste(color, box)
    buf = io.BytesIO()
    img.save(buf, format='PNG')
    return buf.getvalue()


@pytest.fixture
def quadrant_png():
    return make_png()


@pytest.fixture
def png_factory():
    return make_png
