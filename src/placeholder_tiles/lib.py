"""Library utility functions for placeholder-tiles."""

import asyncio
import functools
import io
from concurrent.futures import ThreadPoolExecutor
from importlib import resources

from PIL import ImageFont

from placeholder_tiles.config import config


class RenderError(Exception):
    """Raised when a tile image cannot be produced."""

    pass


class FontLoadError(RenderError):
    """Raised when the bundled label font cannot be read or parsed."""

    pass


class EncodeError(RenderError):
    """Raised when the rendered tile cannot be encoded as PNG."""

    pass


FONT_DIR = "fonts"
FONT_FILE = "DejaVuSansMono-Bold.ttf"

EXECUTOR = ThreadPoolExecutor(
    max_workers=config.get("num_threads"),
    thread_name_prefix="placeholder-tiles-threadpool",
)


async def async_run(func, *args, **kwargs):
    """Run a blocking callable on the shared render thread pool."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        EXECUTOR, functools.partial(func, *args, **kwargs)
    )


@functools.lru_cache(maxsize=8)
def load_font(size: int) -> ImageFont.FreeTypeFont:
    """Load the bundled monospace bold font at ``size`` pixels.

    Parsed fonts are immutable, so they are cached per size.
    """
    try:
        data = (resources.files("placeholder_tiles") / FONT_DIR / FONT_FILE).read_bytes()
        return ImageFont.truetype(io.BytesIO(data), size)
    except (OSError, ValueError) as e:
        raise FontLoadError(f"could not load font {FONT_FILE!r}: {e}") from e
