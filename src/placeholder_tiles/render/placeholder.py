"""Placeholder tile rendering: a framed tile labelled with its coordinate."""

import io

from PIL import Image, ImageDraw, ImageFont

from placeholder_tiles.lib import EncodeError, load_font
from placeholder_tiles.types import TileCoordinate, TileLayout
from placeholder_tiles.utils import time_debug

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
TRANSPARENT = (0, 0, 0, 0)

# outer black ring plus inner white ring
FRAME_WIDTH = 2

# left-up, right-up, left-down, right-down
HALO_DIRECTIONS = ((-1, -1), (1, -1), (-1, 1), (1, 1))


def draw_frame(img: Image.Image) -> None:
    """Draw the two-pixel frame: white one pixel in, then black on the edge."""
    width, height = img.size
    draw = ImageDraw.Draw(img)
    draw.rectangle([(1, 1), (width - 2, height - 2)], outline=WHITE)
    draw.rectangle([(0, 0), (width - 1, height - 1)], outline=BLACK)


def label_origin(
    text: str, font: ImageFont.FreeTypeFont, layout: TileLayout
) -> tuple[float, float]:
    """Left-baseline origin that centres ``text`` horizontally on the tile."""
    text_width = font.getlength(text)
    return (layout.size - text_width) / 2, layout.baseline


def draw_label(img: Image.Image, text: str, layout: TileLayout) -> None:
    """Draw ``text`` with a white halo, clipped to the area inside the frame.

    The halo passes and the black foreground go onto a separate layer which is
    then composited over ``img``; long labels are cut off at the frame.
    """
    font = load_font(layout.font_size)
    origin_x, origin_y = label_origin(text, font, layout)

    # white at zero alpha, so anti-aliased halo edges stay white
    layer = Image.new("RGBA", img.size, (255, 255, 255, 0))
    draw = ImageDraw.Draw(layer)
    offset = layout.halo_offset
    for dx, dy in HALO_DIRECTIONS:
        draw.text(
            (origin_x + dx * offset, origin_y + dy * offset),
            text,
            fill=WHITE,
            font=font,
            anchor="ls",
        )
    draw.text((origin_x, origin_y), text, fill=BLACK, font=font, anchor="ls")

    inner = (
        FRAME_WIDTH,
        FRAME_WIDTH,
        img.width - FRAME_WIDTH,
        img.height - FRAME_WIDTH,
    )
    img.alpha_composite(layer, dest=inner[:2], source=inner)


@time_debug
def render_tile(coord: TileCoordinate, layout: TileLayout | None = None) -> bytes:
    """Render the placeholder tile for ``coord`` and return it PNG-encoded.

    Raises
    ------
    FontLoadError
        If the bundled font cannot be loaded.
    EncodeError
        If PNG encoding fails.
    """
    if layout is None:
        layout = TileLayout.from_config()

    img = Image.new("RGBA", (layout.size, layout.size), TRANSPARENT)
    draw_frame(img)
    draw_label(img, coord.label, layout)

    buffer = io.BytesIO()
    try:
        img.save(buffer, format="PNG")
    except (OSError, ValueError, MemoryError) as e:
        raise EncodeError(f"could not encode tile {coord.label}: {e}") from e
    return buffer.getvalue()
