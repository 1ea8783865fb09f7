"""Shared test utilities."""

import io

import numpy as np
from PIL import Image

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


def is_png(content: bytes) -> bool:
    """Check if ``content`` starts with the PNG signature."""
    # PNG signature: 89 50 4E 47 0D 0A 1A 0A
    return content[:8] == b"\x89PNG\r\n\x1a\n"


def decode_png(content: bytes) -> np.ndarray:
    """Decode PNG bytes into an (height, width, 4) RGBA array."""
    img = Image.open(io.BytesIO(content))
    img.load()
    assert img.format == "PNG"
    return np.array(img.convert("RGBA"))


def assert_frame(arr: np.ndarray):
    """Edge pixels are black, the ring one pixel inward is white."""
    size = arr.shape[0]
    last = size - 1
    for edge in (arr[0, :], arr[last, :], arr[:, 0], arr[:, last]):
        assert (edge == BLACK).all()
    inner = slice(1, last)
    rings = (arr[1, inner], arr[last - 1, inner], arr[inner, 1], arr[inner, last - 1])
    for ring in rings:
        assert (ring == WHITE).all()


def dark_columns(arr: np.ndarray, rows: slice) -> np.ndarray:
    """Column indices holding opaque dark pixels inside ``rows``, frame excluded."""
    band = arr[rows, 2:-2]
    dark = (band[..., 3] > 127) & (band[..., :3].max(axis=-1) < 128)
    return np.nonzero(dark.any(axis=0))[0] + 2
